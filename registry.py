from tutorialbase import ErrorType, TutorialError


# Holds escaping closures until someone decides to call them. Registering
# never calls the handler.
class CompletionRegistry:
    def __init__(self):
        self.handlers = []
        self.invoke_count = 0

    def __len__(self):
        return len(self.handlers)

    def __iter__(self):
        return iter(list(self.handlers))

    #escaping path; returns the handler so this also works as a decorator
    def register(self, handler):
        if not callable(handler):
            raise TutorialError(ErrorType.TYPE_ERROR, f"{handler!r} is not callable")
        self.handlers.append(handler)
        return handler

    def remove(self, handler):
        try:
            self.handlers.remove(handler)
        except ValueError:
            raise TutorialError(ErrorType.NAME_ERROR, "Handler is not registered") from None

    def invoke_first(self):
        if not self.handlers:
            raise TutorialError(ErrorType.VALUE_ERROR, "No completion handler registered")
        handler = self.handlers.pop(0)
        self.invoke_count += 1
        handler()

    # calls every handler in insertion order, returns how many ran
    def invoke_all(self):
        ran = 0
        while self.handlers:
            self.invoke_first()
            ran += 1
        return ran

    #non-escaping path: called once, right now, and never kept
    @staticmethod
    def call_nonescaping(closure):
        closure()


completion_handlers = CompletionRegistry()


def some_function_with_escaping_closure(completion_handler, registry=None):
    (registry if registry is not None else completion_handlers).register(completion_handler)


def some_function_with_nonescaping_closure(closure):
    CompletionRegistry.call_nonescaping(closure)


class SomeClass:
    def __init__(self, x=10):
        self.x = x

    # the escaping closure keeps self alive in the registry until it runs
    def do_something(self, registry=None):
        def set_to_hundred():
            self.x = 100

        def set_to_two_hundred():
            self.x = 200

        some_function_with_escaping_closure(set_to_hundred, registry)
        some_function_with_nonescaping_closure(set_to_two_hundred)
