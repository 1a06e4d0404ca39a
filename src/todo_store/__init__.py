"""todo-store: a minimal task record store with monotonically increasing ids."""

__version__ = "0.1.0"
