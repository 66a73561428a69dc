import sys
from typing import BinaryIO, Optional


class ConsoleIO:
    """Byte-at-a-time access to the program's input and output streams.

    Both streams are binary. When not given, the process's stdin/stdout
    buffers are looked up at construction time.
    """
    def __init__(self, stdin: Optional[BinaryIO] = None, stdout: Optional[BinaryIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout.buffer
        self.bytes_written = 0
        self.bytes_read = 0

    def read_byte(self) -> Optional[int]:
        """Return the next input byte, or None at end of input.

        Pending output is flushed first so prompts are visible before blocking.
        """
        self.stdout.flush()
        data = self.stdin.read(1)
        if not data:
            return None
        self.bytes_read += 1
        return data[0]

    def write_byte(self, byte: int):
        self.stdout.write(bytes((byte,)))
        self.bytes_written += 1
        if byte == 0x0A:
            self.stdout.flush()

    def flush(self):
        self.stdout.flush()
