# The EnvironmentManager class keeps a mapping between each captured variable
# name and its current value. A closure owns exactly one EnvironmentManager, so
# what it captured stays alive as long as the closure does.
class EnvironmentManager:
    def __init__(self, captured=None):
        self.environment = [dict(captured or {})]

    def __len__(self):
        return len(self.environment)

    def __contains__(self, symbol):
        return any(symbol in env for env in self.environment)

    #returns environment at the top of the stack
    def top(self):
        return self.environment[-1]

    # returns the value bound to symbol, None if it was never captured
    def get(self, symbol):
        for env in reversed(self.environment):
            if symbol in env:
                return env[symbol]

        return None

    def set(self, symbol, value):
        for env in reversed(self.environment):
            if symbol in env:
                env[symbol] = value
                return

        # symbol not found anywhere in the environment
        self.environment[-1][symbol] = value

    # create a new symbol in the top-most environment, regardless of whether that symbol exists
    # in a lower environment
    def create(self, symbol, value):
        self.environment[-1][symbol] = value

    # used when a closure is called to hold its arguments
    def push(self):
        self.environment.append({})

    # used when the call returns to discard the argument scope
    def pop(self):
        self.environment.pop()
