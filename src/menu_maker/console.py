"""Text input and output for the menu display loop."""
import re
import sys
import logging
from collections import deque

from .errors import MalformedSelection

logger = logging.getLogger(__name__)

INTEGER_TOKEN = re.compile(r'[+-]?[0-9]+')
# Selections must fit a 32-bit signed int
INT_MIN, INT_MAX = -2**31, 2**31 - 1
MAX_TOKEN_DIGITS = 10


class Console:
    """Reads whitespace separated tokens and writes menu text.

    One Console is shared by a whole menu tree so that tokens typed ahead
    on a single line carry over into submenus.
    """

    def __init__(self, stdin=None, stdout=None):
        """Wrap a pair of text streams.

        Args:
            stdin: Readable text stream, defaults to sys.stdin
            stdout: Writable text stream, defaults to sys.stdout
        """
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._pending = deque()

    def write(self, text):
        self.stdout.write(text)
        self.stdout.flush()

    def read_token(self):
        """Return the next input token, reading more lines as needed.

        Blank lines are skipped. Raises EOFError once the input stream
        is exhausted.
        """
        while not self._pending:
            line = self.stdin.readline()
            if not line:
                raise EOFError("input stream exhausted")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_int(self):
        """Read one token and parse it as an integer.

        Raises MalformedSelection when the token is not an integer; the
        token has been consumed but the rest of its line has not.
        """
        token = self.read_token()
        if not INTEGER_TOKEN.fullmatch(token):
            raise MalformedSelection(token)
        if len(token.lstrip('+-').lstrip('0')) > MAX_TOKEN_DIGITS:
            raise MalformedSelection(token)
        value = int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise MalformedSelection(token)
        return value

    def discard_line(self):
        """Drop whatever is left of the current input line."""
        if self._pending:
            logger.debug(f"Discarding {len(self._pending)} pending token(s)")
        self._pending.clear()
