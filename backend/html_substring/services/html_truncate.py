"""HTML truncation by visible-character budget.

Single left-to-right pass over the code points of a fragment:
  - ``<tag ...>`` / ``</tag>``  never split; opens are held back until
    content under them is written
  - ``<!-- ... -->``            copied verbatim, costs nothing
  - ``&name;``                  never split, costs exactly one character
  - everything else             buffered word by word, flushed under budget

Every tag written to the output is closed, either by its own close tag
or at the cut point in LIFO order.
"""

from typing import Callable

Suffix = str | Callable[[], str] | None

_WHITESPACE = " \t\r\n"


class HtmlSubstringError(ValueError):
    """Markup the truncator cannot pass through without corrupting it."""

    def __init__(self, message: str, offset: int):
        super().__init__(message)
        self.offset = offset


def _is_letter(c: str) -> bool:
    """Cased characters only; digits, punctuation and CJK are not letters."""
    return c.lower() != c.upper()


class Truncator:
    """State for one truncation call.

    After ``run()``:
        current:   visible characters written
        truncated: True if content was withheld or input left unread
    """

    def __init__(self, source: str, length: int, break_words: bool = True):
        self.source = source
        self.n = len(source)
        self.length = max(length, 0)
        self.break_words = break_words

        self.i = 0
        self.current = 0
        self.opened: list[str] = []
        self.pending: list[tuple[str, str]] = []
        self.word: list[str] = []
        self.in_word = False
        self.out: list[str] = []
        self.truncated = False

    # ---------- Output ----------

    def _open_pending(self) -> None:
        for tag, rest in self.pending:
            self.out.append(f"<{tag}{rest}>")
            self.opened.append(tag)
        self.pending.clear()

    def _flush_word(self) -> bool:
        """Commit buffered content under budget. False means stop."""
        if not self.word:
            return True

        room = self.length - self.current
        if self.break_words:
            addable = max(min(room, len(self.word)), 0)
            if addable == 0:
                return False
        elif len(self.word) <= room:
            addable = len(self.word)
        else:
            return False

        self._open_pending()
        self.out.append("".join(self.word[:addable]))
        del self.word[:addable]
        self.current += addable
        return True

    # ---------- Markup ----------

    def _read_until(self, stops: str) -> tuple[str, str]:
        """Consume through the first char in ``stops``.

        Returns (text before it, the stop char); stop is "" at end of input.
        """
        start = self.i
        while self.i < self.n:
            c = self.source[self.i]
            self.i += 1
            if c in stops:
                return self.source[start:self.i - 1], c
        return self.source[start:], ""

    def _open_tag(self) -> None:
        tag, stop = self._read_until(" >")
        rest = ""
        if stop == " ":
            rest, stop = self._read_until(">")
            rest = " " + rest
        # unterminated tag at end of input is dropped
        if stop:
            self.pending.append((tag, rest))

    def _close_tag(self, offset: int) -> None:
        self.i += 1  # '/'
        tag, stop = self._read_until(">")
        if not stop:
            return

        # empty elements: their opens are still pending
        self._open_pending()
        if tag not in self.opened:
            raise HtmlSubstringError(
                f"Unexpected closing tag '{tag}' on offset {offset}", offset
            )
        while True:
            top = self.opened.pop()
            self.out.append(f"</{top}>")
            if top == tag:
                break

    def _comment(self, offset: int) -> None:
        end = self.source.find("-->", self.i + 3)
        stop = self.n if end < 0 else end + 3
        self.out.append(self.source[offset:stop])
        self.i = stop

    def _entity(self, offset: int) -> bool:
        end = self.source.find(";", self.i)
        if end < 0:
            raise HtmlSubstringError(
                f"Expected matching ';' to '&' at offset {offset}", offset
            )
        if not self._flush_word() or self.current >= self.length:
            self.i = offset
            return False

        self._open_pending()
        self.out.append(self.source[offset:end + 1])
        self.current += 1
        self.i = end + 1
        return True

    # ---------- Scanning ----------

    def _step(self) -> bool:
        """Consume one unit of input. False means the budget stopped us."""
        start = self.i
        c = self.source[self.i]
        self.i += 1

        if c == "<":
            if not self._flush_word():
                self.i = start
                return False
            nxt = self.source[self.i:self.i + 1]
            if nxt == "!":
                if self.source.startswith("--", self.i + 1):
                    self._comment(start)
                elif self.current >= self.length:
                    self.i = start
                    return False
                else:
                    # not a comment: '<' is literal content
                    self._open_pending()
                    self.out.append("<")
                    self.current += 1
            elif nxt == "/":
                self._close_tag(start)
            else:
                self._open_tag()
            return True

        if c == "&":
            return self._entity(start)

        if not _is_letter(c) and self.in_word:
            self.in_word = False
            if not self._flush_word():
                self.i = start
                return False
        if c not in _WHITESPACE:
            self.in_word = True
        self.word.append(c)
        return True

    def _drain(self) -> None:
        """Consume close tags and comments right after a clean cut."""
        while True:
            start = self.i
            if self.source.startswith("</", start):
                end = self.source.find(">", start)
                tag = self.source[start + 2:end]
                pending = [name for name, _ in self.pending]
                # past the cut an unmatched close ends the scan, not the call
                if end < 0 or (tag not in self.opened and tag not in pending):
                    return
                self.i += 1
                self._close_tag(start)
            elif self.source.startswith("<!--", start):
                self.i += 1
                self._comment(start)
            else:
                return

    def run(self, suffix: Suffix = None) -> str:
        while self.current < self.length and self.i < self.n:
            if not self._step():
                break

        flushed = self._flush_word()
        if flushed and not self.word:
            self._drain()
            if self.i >= self.n:
                # trailing opens with nothing after them
                self._open_pending()
        self.truncated = not flushed or bool(self.word) or self.i < self.n

        while self.opened:
            self.out.append(f"</{self.opened.pop()}>")

        if self.truncated and suffix is not None:
            self.out.append(suffix() if callable(suffix) else suffix)
        return "".join(self.out)


def truncate_html(
    source: str,
    length: int,
    *,
    break_words: bool = True,
    suffix: Suffix = None,
) -> str:
    """Truncate an HTML fragment to ``length`` visible characters.

    Args:
        source: HTML fragment.
        length: visible characters (everything but tags and comments;
            an entity counts as one) to keep.
        break_words: allow cutting inside a word; otherwise a word that
            does not fit is withheld whole.
        suffix: text, or a callable producing it, appended after the
            auto-closed tags when content was cut.

    Raises:
        HtmlSubstringError: unbalanced close tag or unterminated entity.
    """
    return Truncator(source, length, break_words=break_words).run(suffix)


def count_visible(source: str) -> int:
    """Visible characters in a fragment, counted the way truncation does."""
    truncator = Truncator(source, len(source))
    truncator.run()
    return truncator.current
