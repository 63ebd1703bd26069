#!/usr/bin/env python3
"""
SphereForge - A Python Ray Tracing Renderer

Main entry point for rendering the built-in scene.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from sphereforge.vec3 import Color, Point3
from sphereforge.camera import Camera
from sphereforge.shapes import Sphere, HittableList
from sphereforge.materials import Lambertian, Metal
from sphereforge.renderer import Renderer, RenderSettings, ShadingMode


def create_scene() -> HittableList:
    """Create the scene: a small sphere resting on a large ground sphere."""
    world = HittableList()

    ground = Lambertian(Color(0.8, 0.8, 0.0))
    center = Metal(Color(0.8, 0.6, 0.2), 0.3)

    world.add(Sphere(Point3(0, 0, -1), 0.5, center))
    world.add(Sphere(Point3(0, -101.0, -1), 100.0, ground))

    return world


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='SphereForge - A Python Ray Tracing Renderer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --output render.png
  python main.py --width 400 --samples 50 --shading path --output path.png
  python main.py --width 800 --aspect-ratio 1.7778 --seed 7
        '''
    )

    parser.add_argument('--width', type=int, default=1500, help='Image width (default: 1500)')
    parser.add_argument('--aspect-ratio', type=float, default=2.0, help='Width / height (default: 2.0)')
    parser.add_argument('--samples', type=int, default=10, help='Samples per pixel (default: 10)')
    parser.add_argument('--shading', type=str, default=ShadingMode.NORMALS.value,
                        choices=[mode.value for mode in ShadingMode],
                        help='Shading mode (default: normals)')
    parser.add_argument('--depth', type=int, default=50, help='Max ray depth for path shading (default: 50)')
    parser.add_argument('--threads', type=int, default=0, help='Number of threads (0=auto)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducible renders')
    parser.add_argument('--output', type=str, default='output/render.png', help='Output filename')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    print("=" * 60)
    print("SphereForge Ray Tracer")
    print("=" * 60)

    camera = Camera(args.width, args.aspect_ratio, args.samples)
    settings = RenderSettings(
        shading=ShadingMode(args.shading),
        max_depth=args.depth,
        num_threads=args.threads,
        seed=args.seed
    )

    print(f"\nRender Settings:")
    print(f"  Resolution: {camera.image_width}x{camera.image_height}")
    print(f"  Samples: {camera.samples_per_pixel}")
    print(f"  Shading: {settings.shading.value}")
    if settings.shading is ShadingMode.PATH:
        print(f"  Max Depth: {settings.max_depth}")
    print(f"  Threads: {settings.num_threads}")

    world = create_scene()
    print(f"  Objects in scene: {len(world)}")

    renderer = Renderer(settings)

    # Progress tracking
    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    print("\nRendering...")
    start_time = time.time()

    image = renderer.render(world, camera)

    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")
    rays = camera.image_width * camera.image_height * camera.samples_per_pixel
    print(f"  Primary rays per second: {rays / max(elapsed, 1e-9):.0f}")

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    print(f"\nSaving to: {args.output}")
    renderer.save_image(image, str(output_path))

    print("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
