"""A stand-in native module for the wrapper tests."""

magic_number = 42
config = None


class Counter:
    def __init__(self, value=0, step=1):
        self.value = value
        self.step = step

    def increment(self):
        self.value += self.step
        return self.value

    def add(self, other):
        self.value += other.value if isinstance(other, Counter) else other
        return self.value


class Emitter:
    """Minimal emitter with identity-based listener removal."""

    def __init__(self):
        self._listeners = {}

    def on(self, event_name, fn):
        self._listeners.setdefault(event_name, []).append(fn)

    def removeListener(self, event_name, fn):
        listeners = self._listeners.get(event_name, [])
        if fn in listeners:
            listeners.remove(fn)

    def emit(self, event_name, *values):
        for fn in list(self._listeners.get(event_name, [])):
            fn(*values)

    def listener_count(self, event_name):
        return len(self._listeners.get(event_name, []))


def add(a, b):
    return a + b


def greet(name="stranger"):
    return f"Hello, {name}!"


def nothing():
    return None


def identity(value):
    return value


def make_counter(value):
    return Counter(value)


def describe(options):
    return options


def fail():
    raise ValueError("native failure")
