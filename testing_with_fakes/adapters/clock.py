import time


class SystemMonotonicClock:
    def monotonic(self) -> float:
        return time.perf_counter()
