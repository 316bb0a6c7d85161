from env import EnvironmentManager
from tutorialbase import ErrorType, TutorialError


class Lambda:
    #hold parameter names and the body to run against an environment
    def __init__(self, args, body):
        self.a = list(args)
        self.b = body

    def args(self):
        return self.a

    def body(self):
        return self.b


class Closure:
    def __init__(self, lamb, env):
        self.l = lamb
        self.e = env

    def lamb(self):
        return self.l

    def lenv(self):
        return self.e

    # arguments live in their own scope for the duration of the call, captured
    # variables persist in the scopes below it
    def __call__(self, *call_args):
        params = self.l.args()
        if len(call_args) != len(params):
            raise TutorialError(
                ErrorType.TYPE_ERROR,
                f"Closure takes {len(params)} argument(s), {len(call_args)} given",
            )
        self.e.push()
        try:
            for name, value in zip(params, call_args):
                self.e.create(name, value)
            return self.l.body()(self.e)
        finally:
            self.e.pop()


def _increment(env):
    env.set("running_total", env.get("running_total") + env.get("amount"))
    return env.get("running_total")


# returns a counter closure capturing running_total and amount; each call adds
# amount and returns the new total
def make_incrementer(amount, seed=2):
    env = EnvironmentManager({"running_total": seed, "amount": amount})
    return Closure(Lambda([], _increment), env)
