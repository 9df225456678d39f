"""Recording test doubles for senders and executors."""


class RecordingSender:
    """Sender that records messages and holds a fixed permission set."""

    def __init__(self, permissions=()):
        self.permissions = set(permissions)
        self.messages = []

    def has_permission(self, permission):
        return permission in self.permissions

    def send_message(self, text):
        self.messages.append(text)


class RecordingExecutor:
    """Executor that records each (sender, env) call."""

    def __init__(self):
        self.calls = []

    def __call__(self, sender, env):
        self.calls.append((sender, {key: list(args) for key, args in env.items()}))

    @property
    def called(self):
        return bool(self.calls)

    @property
    def last_env(self):
        return self.calls[-1][1]
