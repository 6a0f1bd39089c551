import random
import threading

import numpy as np
import pytest

from tiletracer.renderer.image import Image
from tiletracer.renderer.jobs import AtomicCounter, Job, JobQueue, partition_tiles


def test_partition_clips_edge_tiles():
    tiles = partition_tiles(100, 50, 32, 32)
    assert len(tiles) == 8
    assert tiles[0] == (0, 32, 0, 32)
    assert tiles[1] == (32, 64, 0, 32)
    assert tiles[3] == (96, 100, 0, 32)
    assert tiles[4] == (0, 32, 32, 50)
    assert tiles[-1] == (96, 100, 32, 50)


def test_partition_exact_division():
    tiles = partition_tiles(64, 32, 16, 16)
    assert len(tiles) == 8
    assert all(x_max - x_min == 16 and y_max - y_min == 16 for x_min, x_max, y_min, y_max in tiles)


@pytest.mark.parametrize("width,height,tile_w,tile_h", [
    (100, 50, 32, 32),
    (17, 9, 5, 4),
    (1, 1, 8, 8),
    (33, 65, 1, 64),
])
def test_partition_covers_every_pixel_once(width, height, tile_w, tile_h):
    coverage = np.zeros((height, width), dtype=np.int32)
    for x_min, x_max, y_min, y_max in partition_tiles(width, height, tile_w, tile_h):
        assert 0 <= x_min < x_max <= width
        assert 0 <= y_min < y_max <= height
        coverage[y_min:y_max, x_min:x_max] += 1
    assert (coverage == 1).all()


def test_atomic_counter_fetch_add():
    counter = AtomicCounter(5)
    assert counter.fetch_add() == 5
    assert counter.fetch_add(10) == 6
    assert counter.value == 16


def test_atomic_counter_under_contention():
    counter = AtomicCounter()

    def bump():
        for _ in range(2000):
            counter.fetch_add(1)

    threads = [threading.Thread(target=bump) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert counter.value == 16000


def test_every_job_is_claimed_exactly_once():
    queue = JobQueue(list(range(500)), samples_per_pixel=1, ray_depth=1)
    claimed = [[] for _ in range(8)]

    def drain(bucket):
        while True:
            job = queue.claim()
            if job is None:
                return
            bucket.append(job)

    threads = [threading.Thread(target=drain, args=(bucket,)) for bucket in claimed]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    everything = sorted(job for bucket in claimed for job in bucket)
    assert everything == list(range(500))


def test_exhausted_queue_keeps_returning_none():
    queue = JobQueue(["only"], samples_per_pixel=1, ray_depth=1)
    assert queue.claim() == "only"
    assert queue.claim() is None
    assert queue.claim() is None


def test_queue_for_image_and_progress():
    image = Image(10, 6)
    queue = JobQueue.for_image(image, world=None, camera=None, tile_width=4, tile_height=4,
                               samples_per_pixel=2, ray_depth=3)
    assert queue.jobs_count == 6
    assert queue.progress() == 0.0
    assert not queue.finished
    assert sum(job.pixel_count for job in queue.jobs) == 60

    for _ in range(6):
        queue.finished_jobs.fetch_add(1)
    assert queue.finished
    assert queue.progress() == 1.0


def test_empty_queue_is_finished():
    queue = JobQueue([], samples_per_pixel=1, ray_depth=1)
    assert queue.finished
    assert queue.progress() == 1.0
    assert queue.claim() is None


def test_job_regions_do_not_share_memory():
    image = Image(12, 8)
    queue = JobQueue.for_image(image, None, None, 5, 3, 1, 1)
    regions = [job.region() for job in queue.jobs]
    for i, a in enumerate(regions):
        for b in regions[i + 1:]:
            assert not np.shares_memory(a, b)


def test_job_region_writes_reach_image():
    image = Image(4, 4)
    job = Job(image, None, None, 2, 4, 1, 3)
    job.region()[0, 0] = 7
    assert image.pixels[1, 2] == 7
    assert job.pixel_count == 4


def test_jobs_are_indexed_in_row_major_order():
    queue = JobQueue.for_image(Image(10, 6), None, None, 4, 4, 1, 1)
    assert [job.index for job in queue.jobs] == list(range(6))
    assert (queue.jobs[3].x_min, queue.jobs[3].y_min) == (0, 4)


def test_seeded_queue_gives_each_job_its_own_stream():
    queue = JobQueue.for_image(Image(8, 8), None, None, 4, 4, 1, 1, seed=9)
    first, second = queue.jobs[0], queue.jobs[1]

    rng, rng_again = queue.rng_for(first), queue.rng_for(first)
    assert [rng.random() for _ in range(5)] == [rng_again.random() for _ in range(5)]
    assert queue.rng_for(first).random() != queue.rng_for(second).random()

    other_seed = JobQueue.for_image(Image(8, 8), None, None, 4, 4, 1, 1, seed=10)
    assert queue.rng_for(first).random() != other_seed.rng_for(other_seed.jobs[0]).random()


def test_unseeded_queue_uses_global_generator():
    queue = JobQueue.for_image(Image(4, 4), None, None, 4, 4, 1, 1)
    assert queue.rng_for(queue.jobs[0]) is random
