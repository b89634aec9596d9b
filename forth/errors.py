class ForthError(Exception):
    message = "Error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail


class DivisionByZero(ForthError):
    message = "Error: division by zero"


class StackUnderflow(ForthError):
    message = "Error: stack underflow"


class UnknownWord(ForthError):
    message = "Error: unknown word"


class InvalidWord(ForthError):
    message = "Error: invalid word"
