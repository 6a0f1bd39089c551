# renderer/raytracer.py
import logging
import sys
import threading
import time
from typing import Optional

from tiletracer.config import POLL_INTERVAL, RenderSettings
from tiletracer.core.vector import Color
from .image import Image
from .integrator import trace
from .jobs import JobQueue
from .tone_mapping import color_to_pixel

logger = logging.getLogger(__name__)

class RenderError(RuntimeError):
    """A render thread failed, so the image can never be completed."""

class Renderer:
    """
    Tile-based CPU path tracer.

    The image is cut into tiles up front. ``settings.workers`` background
    threads and the calling thread then claim tiles from a shared queue until
    none are left; every tile is written by exactly one thread.
    """
    def __init__(self, settings: RenderSettings, show_progress: bool = True):
        self.settings = settings.validate()
        self.show_progress = show_progress
        self.last_queue: Optional[JobQueue] = None

    def render(self, world, camera) -> Image:
        settings = self.settings
        image = Image(settings.width, settings.height)
        queue = JobQueue.for_image(
            image, world, camera,
            settings.tile_width, settings.tile_height,
            settings.samples_per_pixel, settings.ray_depth,
            seed=settings.seed,
        )
        self.last_queue = queue

        logger.info("Rendering %dx%d in %d tiles with %d worker threads",
                    image.width, image.height, queue.jobs_count, settings.workers)

        threads = [
            threading.Thread(target=self._work, args=(queue,),
                             name=f"tiletracer-worker-{i}", daemon=True)
            for i in range(settings.workers)
        ]
        for thread in threads:
            thread.start()

        # The coordinating thread renders as well, then waits for the stragglers
        last_reported = -1
        while not queue.finished:
            if queue.error is not None:
                break
            try:
                claimed = self.render_tile(queue)
            except Exception as e:
                self._record_error(queue, e)
                break
            last_reported = self._report_progress(queue, last_reported)
            if not claimed:
                time.sleep(POLL_INTERVAL)

        for thread in threads:
            thread.join()

        if queue.error is not None:
            raise RenderError("Rendering stopped because a tile failed") from queue.error

        self._report_progress(queue, last_reported)
        if self.show_progress:
            print()
        return image

    def render_tile(self, queue: JobQueue) -> bool:
        """
        Claim one job and render it. Returns False once the queue is exhausted.
        """
        job = queue.claim()
        if job is None:
            return False

        image = job.image
        world = job.world
        camera = job.camera
        depth = queue.ray_depth
        samples_per_pixel = queue.samples_per_pixel
        rng = queue.rng_for(job)
        inv_width = 1.0 / image.width
        inv_height = 1.0 / image.height

        region = job.region()
        for y in range(job.y_min, job.y_max):
            row = region[y - job.y_min]
            for x in range(job.x_min, job.x_max):
                color = Color(0.0, 0.0, 0.0)
                for _ in range(samples_per_pixel):
                    film_x = (x + rng.random()) * inv_width
                    film_y = (y + rng.random()) * inv_height
                    ray = camera.get_ray(film_x, film_y, rng)
                    color = color + trace(world, ray, depth, rng)

                color = color / samples_per_pixel
                row[x - job.x_min] = color_to_pixel(color)

        queue.total_bounces.fetch_add(job.pixel_count * samples_per_pixel)
        queue.finished_jobs.fetch_add(1)
        return True

    def _work(self, queue: JobQueue) -> None:
        try:
            while queue.error is None and self.render_tile(queue):
                pass
        except Exception as e:
            self._record_error(queue, e)

    @staticmethod
    def _record_error(queue: JobQueue, error: Exception) -> None:
        logger.error("Render thread %s failed: %s", threading.current_thread().name, error)
        if queue.error is None:
            queue.error = error

    def _report_progress(self, queue: JobQueue, last_reported: int) -> int:
        percent = int(queue.progress() * 10000)
        if self.show_progress and percent != last_reported:
            sys.stdout.write(f"\rRaycasting {percent / 100:.2f}%")
            sys.stdout.flush()
        return percent
