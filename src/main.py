# main.py
import argparse
import dataclasses
import logging
import sys
import numpy as np
from renderer.image_output import save_image, to_image_array
from renderer.raytracer import Renderer
from renderer.settings import RenderSettings
from scene.reader import SceneFormatError, read_scene

logger = logging.getLogger("raytracer")

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Whitted-style CPU ray tracer")
    parser.add_argument('scene', help='Path to the scene description file')
    parser.add_argument('--output', type=str, default=None,
                        help="Image path (default: the scene's 'output' command, else output.png)")
    parser.add_argument('--workers', type=int, default=None,
                        help='Number of worker processes (default: one per CPU)')
    parser.add_argument('--max-depth', type=int, default=None,
                        help="Override the scene's reflection depth")
    parser.add_argument('--quiet', action='store_true', help='Hide the progress bar')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    parser.add_argument('--preview', action='store_true',
                        help='Show the result in a window when done (needs pygame)')
    return parser.parse_args(argv)

def preview(image: np.ndarray, title: str = "Ray Tracer"):
    """Shows a (height, width, 3) uint8 image in a pygame window until it is closed."""
    import pygame

    pygame.init()
    try:
        height, width = image.shape[:2]
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # pygame surfaces are indexed [x, y].
        surface = pygame.surfarray.make_surface(image.transpose(1, 0, 2))
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        scene = read_scene(args.scene)
        settings = RenderSettings(workers=args.workers, show_progress=not args.quiet)
    except (OSError, SceneFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.max_depth is not None:
        scene = dataclasses.replace(scene, max_depth=args.max_depth)
    output = args.output or scene.output_file

    frame = Renderer(settings).render(scene)
    save_image(frame, output)

    if args.preview:
        preview(to_image_array(frame), title=output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
