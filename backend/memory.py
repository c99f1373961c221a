"""
Memory register (MC / M+ / M- / MS / MR).
"""


class MemoryCell:
    def __init__(self):
        self.value = 0.0

    def clear(self):
        self.value = 0.0

    def add(self, value: float):
        self.value += value

    def subtract(self, value: float):
        self.value -= value

    def store(self, value: float):
        self.value = value

    def recall(self) -> float:
        return self.value

    def has_memory(self) -> bool:
        # Exact comparison: a tiny residue such as 0.1 + 0.2 - 0.3 still counts.
        return self.value != 0.0
