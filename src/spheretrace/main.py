# main.py
import sys
import time
from spheretrace.camera.camera import Camera
from spheretrace.config import ConfigError, build_parser, parse_args
from spheretrace.core.vector import Vector3
from spheretrace.geometry.sphere import Sphere
from spheretrace.geometry.world import HittableList
from spheretrace.renderer.framebuffer import OutputError
from spheretrace.renderer.raytracer import Renderer, RenderSettings


def create_world() -> HittableList:
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5))
    # Ground
    world.add(Sphere(Vector3(0, -100.5, -1), 100))
    return world


def main(argv=None):
    try:
        config = parse_args(argv)
    except ConfigError as e:
        print(f"spheretrace: error: {e}", file=sys.stderr)
        build_parser().print_usage(sys.stderr)
        sys.exit(2)

    world = create_world()
    camera = Camera(aspect_ratio=config.aspect_ratio)
    settings = RenderSettings(
        width=config.width,
        height=config.height,
        samples_per_pixel=config.samples,
        max_depth=config.max_depth,
        seed=config.seed,
        workers=config.workers,
    )
    renderer = Renderer(settings)

    print(f"Rendering {config.width}x{config.height}, {config.samples} samples/pixel, "
          f"max depth {config.max_depth}, {len(world)} objects, {renderer.workers} workers")
    t0 = time.time()
    framebuffer = renderer.render(camera, world)
    print(f"Render complete in {time.time() - t0:.2f}s (seed {renderer.entropy})")

    try:
        framebuffer.write(config.output)
    except OutputError as e:
        print(f"spheretrace: error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Wrote {config.output}")


if __name__ == "__main__":
    main()
