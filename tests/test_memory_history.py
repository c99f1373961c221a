from backend.history import HistoryEntry, HistoryLog
from backend.memory import MemoryCell


class TestMemoryCell:
    def setup_method(self):
        self.memory = MemoryCell()

    def test_starts_empty(self):
        assert self.memory.recall() == 0.0
        assert not self.memory.has_memory()

    def test_store_add_subtract(self):
        self.memory.store(7)
        self.memory.add(3)
        self.memory.subtract(2)
        assert self.memory.recall() == 8
        assert self.memory.has_memory()

    def test_clear(self):
        self.memory.store(7)
        self.memory.clear()
        assert self.memory.recall() == 0
        assert not self.memory.has_memory()

    def test_indicator_uses_exact_comparison(self):
        self.memory.store(0.1)
        self.memory.add(0.2)
        self.memory.subtract(0.3)
        assert self.memory.has_memory()


class TestHistoryLog:
    def setup_method(self):
        self.log = HistoryLog()

    def test_most_recent_first(self):
        self.log.append("1 + 1", "2")
        self.log.append("2 * 3", "6")
        assert self.log.entries() == (HistoryEntry("2 * 3", "6"), HistoryEntry("1 + 1", "2"))

    def test_capacity_evicts_oldest(self):
        for i in range(11):
            self.log.append(f"{i} + 0", str(i))
        entries = self.log.entries()
        assert len(entries) == 10
        assert entries[0].result == "10"
        assert entries[-1].result == "1"
        assert all(e.result != "0" for e in entries)

    def test_clear(self):
        self.log.append("1 + 1", "2")
        self.log.clear()
        assert len(self.log) == 0
        assert self.log.entries() == ()

    def test_entry_text(self):
        assert str(HistoryEntry("2 + 3", "5")) == "2 + 3 = 5"
