"""Character sources whose streams fail on demand."""

import io


class FlakyStream(io.StringIO):
    """StringIO that can fail on the n-th readline() or on the first close()."""

    def __init__(
        self,
        text: str,
        fail_on_read: int | None = None,
        fail_on_close: bool = False,
        read_error: type[Exception] = OSError,
    ) -> None:
        super().__init__(text, newline="")
        self.fail_on_read = fail_on_read
        self.fail_on_close = fail_on_close
        self.read_error = read_error
        self.reads = 0

    def readline(self, size: int | None = -1) -> str:
        self.reads += 1
        if self.fail_on_read is not None and self.reads >= self.fail_on_read:
            error_msg = "simulated read failure"
            raise self.read_error(error_msg)
        return super().readline(size)

    def close(self) -> None:
        first = not self.closed
        super().close()
        if self.fail_on_close and first:
            error_msg = "simulated close failure"
            raise OSError(error_msg)


class FlakySource:
    """Character source handing out FlakyStreams and remembering them."""

    def __init__(
        self,
        text: str,
        fail_on_read: int | None = None,
        fail_on_close: bool = False,
        read_error: type[Exception] = OSError,
    ) -> None:
        self.text = text
        self.fail_on_read = fail_on_read
        self.fail_on_close = fail_on_close
        self.read_error = read_error
        self.streams: list[FlakyStream] = []

    def open_stream(self) -> FlakyStream:
        stream = FlakyStream(self.text, self.fail_on_read, self.fail_on_close, self.read_error)
        self.streams.append(stream)
        return stream
