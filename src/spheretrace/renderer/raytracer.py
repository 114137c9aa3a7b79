# renderer/raytracer.py
import os
import random
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple
import numpy as np
from spheretrace.camera.camera import Camera
from spheretrace.core.color import BLACK, Color, gamma_correct
from spheretrace.geometry.hittable import Hittable
from spheretrace.renderer.framebuffer import Framebuffer
from spheretrace.renderer.progress import ProgressMeter
from spheretrace.renderer.shading import ray_color

Pixel = Tuple[int, int, Color]


@dataclass(frozen=True)
class RenderSettings:
    width: int
    height: int
    samples_per_pixel: int = 64
    max_depth: int = 32
    seed: Optional[int] = None
    workers: Optional[int] = None


def row_rng(entropy: int, row: int) -> random.Random:
    """
    Private random source for one row.

    The stream depends only on (entropy, row), so a row renders identically
    whichever worker picks it up and in whatever order rows finish.
    """
    seq = np.random.SeedSequence(entropy, spawn_key=(row,))
    return random.Random(int.from_bytes(seq.generate_state(4).tobytes(), "little"))


def render_row(y: int, camera: Camera, world: Hittable, settings: RenderSettings,
               entropy: int) -> List[Pixel]:
    """
    Render every pixel of row `y` and return its (x, y, color) tuples.
    Colors are averaged over all samples and gamma corrected.
    """
    rng = row_rng(entropy, y)
    samples = settings.samples_per_pixel
    # Single-pixel dimensions would otherwise divide by zero.
    x_span = max(settings.width - 1, 1)
    y_span = max(settings.height - 1, 1)

    row = []
    for x in range(settings.width):
        pixel_color = BLACK
        for _ in range(samples):
            # Jitter may push u, v half a pixel past the viewport; not clamped.
            u = (x + rng.uniform(-0.5, 0.5)) / x_span
            v = (y + rng.uniform(-0.5, 0.5)) / y_span
            ray = camera.get_ray(u, v)
            pixel_color = pixel_color + ray_color(ray, world, settings.max_depth, rng)
        row.append((x, y, gamma_correct(pixel_color / samples)))
    return row


# Scene state installed once per worker process by the pool initializer.
# Read-only after installation.
_worker_scene = {}


def _init_worker(camera: Camera, world: Hittable, settings: RenderSettings, entropy: int):
    _worker_scene["camera"] = camera
    _worker_scene["world"] = world
    _worker_scene["settings"] = settings
    _worker_scene["entropy"] = entropy


def _render_row_task(y: int) -> List[Pixel]:
    return render_row(y, _worker_scene["camera"], _worker_scene["world"],
                      _worker_scene["settings"], _worker_scene["entropy"])


class Renderer:
    """
    Distributes rows across a process pool and gathers finished pixels.

    Workers never touch the framebuffer: each row comes back as a list of
    (x, y, color) tuples and the caller's thread is the only writer.
    """
    def __init__(self, settings: RenderSettings, progress: bool = True, progress_stream=None):
        self.settings = settings
        self.progress = progress
        self.progress_stream = progress_stream
        self.entropy = settings.seed

    @property
    def workers(self) -> int:
        return self.settings.workers or os.cpu_count() or 1

    def iter_pixels(self, camera: Camera, world: Hittable) -> Iterator[Pixel]:
        """
        Yield one (x, y, color) per pixel, in completion order.
        """
        settings = self.settings
        # Fresh entropy is kept on the renderer so an unseeded run can be replayed.
        if settings.seed is None:
            self.entropy = np.random.SeedSequence().entropy
        else:
            self.entropy = settings.seed

        meter = ProgressMeter(settings.width * settings.height,
                              stream=self.progress_stream, enabled=self.progress)
        executor = ProcessPoolExecutor(max_workers=self.workers,
                                       initializer=_init_worker,
                                       initargs=(camera, world, settings, self.entropy))
        drained = False
        try:
            futures = [executor.submit(_render_row_task, y) for y in range(settings.height)]
            for future in as_completed(futures):
                row = future.result()
                yield from row
                meter.update(len(row))
            drained = True
        finally:
            # A consumer failure is fatal: drop queued rows instead of rendering them.
            executor.shutdown(wait=drained, cancel_futures=not drained)
        meter.finish()

    def render(self, camera: Camera, world: Hittable) -> Framebuffer:
        framebuffer = Framebuffer(self.settings.width, self.settings.height)
        pixels = self.iter_pixels(camera, world)
        try:
            for x, y, color in pixels:
                framebuffer.set(x, y, color)
        finally:
            pixels.close()
        if not framebuffer.is_complete():
            missing = framebuffer.width * framebuffer.height - framebuffer.written_count
            raise RuntimeError(f"Render finished with {missing} pixels never delivered")
        return framebuffer
