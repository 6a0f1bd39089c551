# renderer/jobs.py
import random
import threading
from typing import List, Optional, Sequence, Tuple

class AtomicCounter:
    """
    Integer counter shared between render threads. Every update is a single
    fetch-and-add under a lock; there is no compare-and-swap loop.
    """
    def __init__(self, value: int = 0):
        self._value = value
        self._lock = threading.Lock()

    def fetch_add(self, n: int = 1) -> int:
        """Add ``n`` and return the value held before the addition."""
        with self._lock:
            previous = self._value
            self._value += n
            return previous

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"AtomicCounter({self._value})"

class Job:
    """
    One tile of the image: pixels [x_min, x_max) x [y_min, y_max) plus the
    shared scene it is rendered from. ``index`` is the tile position in
    row-major order.
    """
    def __init__(self, image, world, camera, x_min: int, x_max: int, y_min: int, y_max: int,
                 index: int = 0):
        self.index = index
        self.image = image
        self.world = world
        self.camera = camera
        self.x_min = x_min
        self.x_max = x_max
        self.y_min = y_min
        self.y_max = y_max

    @property
    def pixel_count(self) -> int:
        return (self.x_max - self.x_min) * (self.y_max - self.y_min)

    def region(self):
        return self.image.region(self.x_min, self.x_max, self.y_min, self.y_max)

    def __repr__(self) -> str:
        return f"Job(x=[{self.x_min}, {self.x_max}), y=[{self.y_min}, {self.y_max}))"

def partition_tiles(width: int, height: int,
                    tile_width: int, tile_height: int) -> List[Tuple[int, int, int, int]]:
    """
    Split the image into (x_min, x_max, y_min, y_max) tiles, tile row by tile
    row. Tiles on the right and top edges are clipped to the image.
    """
    tile_count_x = (width + tile_width - 1) // tile_width
    tile_count_y = (height + tile_height - 1) // tile_height

    tiles = []
    for tile_y in range(tile_count_y):
        y_min = tile_y * tile_height
        y_max = min(y_min + tile_height, height)
        for tile_x in range(tile_count_x):
            x_min = tile_x * tile_width
            x_max = min(x_min + tile_width, width)
            tiles.append((x_min, x_max, y_min, y_max))
    return tiles

class JobQueue:
    """
    Fixed list of jobs handed out through an atomic claim cursor.

    Each index in ``[0, jobs_count)`` is returned by exactly one successful
    ``claim()``. ``finished_jobs`` and ``total_bounces`` are updated by the
    threads that render the jobs; ``total_bounces`` is diagnostics only.

    With a ``seed`` every job samples from its own generator derived from the
    seed and the job index, so the image does not depend on which thread
    rendered which tile. Without one all jobs share the global generator.
    """
    def __init__(self, jobs: Sequence[Job], samples_per_pixel: int, ray_depth: int,
                 seed: Optional[int] = None):
        self.jobs = tuple(jobs)
        self.samples_per_pixel = samples_per_pixel
        self.ray_depth = ray_depth
        self.seed = seed

        self.next_job = AtomicCounter()
        self.finished_jobs = AtomicCounter()
        self.total_bounces = AtomicCounter()

        # First exception raised by a render thread, if any
        self.error: Optional[BaseException] = None

    @classmethod
    def for_image(cls, image, world, camera, tile_width: int, tile_height: int,
                  samples_per_pixel: int, ray_depth: int,
                  seed: Optional[int] = None) -> "JobQueue":
        jobs = [
            Job(image, world, camera, x_min, x_max, y_min, y_max, index)
            for index, (x_min, x_max, y_min, y_max) in enumerate(partition_tiles(
                image.width, image.height, tile_width, tile_height))
        ]
        return cls(jobs, samples_per_pixel, ray_depth, seed)

    @property
    def jobs_count(self) -> int:
        return len(self.jobs)

    @property
    def finished(self) -> bool:
        return self.finished_jobs.value >= self.jobs_count

    def claim(self) -> Optional[Job]:
        """Take the next unrendered job, or None once the queue is exhausted."""
        job_index = self.next_job.fetch_add(1)
        if job_index >= self.jobs_count:
            return None
        return self.jobs[job_index]

    def rng_for(self, job: Job):
        """Random source for one job."""
        if self.seed is None:
            return random
        return random.Random(f"{self.seed}:{job.index}")

    def progress(self) -> float:
        if not self.jobs:
            return 1.0
        return self.finished_jobs.value / self.jobs_count
