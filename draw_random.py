from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import numpy as np

from scene import SceneConfig, initialize_scene, demo_scene, draw_scene
from plotting.renderer import RasterImage, preview


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Rasterize random shapes into a PNG image.")
    p.add_argument("--width", type=int, default=1000, help="image width in pixels (default: 1000)")
    p.add_argument("--height", type=int, default=1000, help="image height in pixels (default: 1000)")
    p.add_argument("--seed", type=int, default=None, help="random seed (default: fresh entropy)")
    p.add_argument("--points", type=int, default=0, help="number of random points")
    p.add_argument("--lines", type=int, default=1, help="number of random lines (default: 1)")
    p.add_argument("--triangles", type=int, default=0, help="number of random triangles")
    p.add_argument("--rectangles", type=int, default=0, help="number of random rectangles")
    p.add_argument("--circles", type=int, default=50, help="number of random circles (default: 50)")
    p.add_argument("--demo", action="store_true", help="draw the fixed demo composition instead")
    p.add_argument("--out", type=str, default="image.png", help="output image path (default: image.png)")
    p.add_argument("--show", action="store_true", help="open a matplotlib preview after saving")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> SceneConfig:
    return SceneConfig(
        width=args.width,
        height=args.height,
        random_seed=args.seed,
        num_points=args.points,
        num_lines=args.lines,
        num_triangles=args.triangles,
        num_rectangles=args.rectangles,
        num_circles=args.circles,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    cfg = config_from_args(args)
    if args.demo:
        rng = np.random.default_rng(cfg.random_seed)
        shapes = demo_scene(rng, cfg, num_circles=cfg.num_circles)
    else:
        _, shapes = initialize_scene(cfg)
    print(f"Drawing {len(shapes)} shapes on {cfg.width}x{cfg.height} (seed={cfg.random_seed})")
    image = RasterImage(cfg.width, cfg.height, background=cfg.background)
    draw_scene(image, shapes)
    image.save(args.out)
    print(f"Saved: {args.out}")
    if args.show:
        preview(image, title=args.out)


if __name__ == "__main__":
    main()
