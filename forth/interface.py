from forth.session import Session
from forth.errors import ForthError


SEPARATOR = "<br/>"


def interpret(code: str, separator: str = SEPARATOR) -> str:
    session = Session()
    try:
        session.evaluate(code)
    except ForthError as e:
        return e.message
    return render_stack(session.stack(), separator)


def render_stack(stack: list[int], separator: str = SEPARATOR) -> str:
    # Top of stack first
    return separator.join(str(value) for value in reversed(stack))
