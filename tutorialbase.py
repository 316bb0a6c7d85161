from enum import Enum


class ErrorType(Enum):
    TYPE_ERROR = 1
    NAME_ERROR = 2
    VALUE_ERROR = 3


class TutorialError(Exception):
    def __init__(self, error_type, description):
        super().__init__(f"{error_type.name}: {description}")
        self.error_type = error_type
        self.description = description


# renders a value the way the playground prints it
def get_printable(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_quoted(item) for item in value) + "]"
    return str(value)


def _quoted(item):
    if isinstance(item, str):
        return '"' + item + '"'
    return get_printable(item)


# Base class for the tutorial driver. Every line the tutorial shows goes
# through output() so it is both printed and kept for later inspection.
class TutorialBase:
    def __init__(self, console_output=True, trace_output=False):
        self.console_output = console_output
        self.trace_output = trace_output
        self.output_log = []

    def output(self, value):
        line = get_printable(value)
        self.output_log.append(line)
        if self.console_output:
            print(line)

    def get_output(self):
        return self.output_log

    def trace(self, text):
        if self.trace_output:
            print(f"-- {text}")

    def error(self, error_type, description):
        raise TutorialError(error_type, description)
