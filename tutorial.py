import argparse

import digits
import sorting
from closure import make_incrementer
from registry import CompletionRegistry, SomeClass
from tutorialbase import TutorialBase


def some_function_that_takes_a_closure(closure):
    closure()
    return closure


# Main tutorial class: walks through each closure snippet in order and
# reports what it produced through output()
class Tutorial(TutorialBase):
    def __init__(self, console_output=True, trace_output=False):
        super().__init__(console_output, trace_output)
        self.registry = CompletionRegistry()

    def run(self):
        self.__sort_names()
        self.__trailing_closures()
        self.__map_digits()
        self.__capture_values()
        self.__escaping_closures()
        return self.get_output()

    def __sort_names(self):
        for label, sort in sorting.SORT_FORMS:
            self.trace(f"sorting by {label}")
            self.output(sort(sorting.NAMES))

    def __trailing_closures(self):
        self.trace("closure passed as an argument")
        some_function_that_takes_a_closure(
            lambda: self.output("I am a function taking a closure parameter")
        )

        self.trace("closure passed with decorator syntax")

        @some_function_that_takes_a_closure
        def _():
            self.output("Closure without argument label")

    def __map_digits(self):
        self.trace(f"mapping {digits.NUMBERS} to digit names")
        self.output(digits.digit_strings(digits.NUMBERS))

    def __capture_values(self):
        incrementer = make_incrementer(4)
        self.trace(f"incrementer captured {incrementer.lenv().top()}")
        self.output(incrementer())

    def __escaping_closures(self):
        instance = SomeClass()
        instance.do_something(self.registry)
        self.trace(f"{len(self.registry)} escaping closure(s) waiting")
        self.output(instance.x)

        self.registry.invoke_first()
        self.output(instance.x)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Walk through closure examples")
    parser.add_argument("--trace", action="store_true", help="print each step before running it")
    parser.add_argument("--quiet", action="store_true", help="record output without printing it")
    args = parser.parse_args(argv)
    tutorial = Tutorial(console_output=not args.quiet, trace_output=args.trace)
    tutorial.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
