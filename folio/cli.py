import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from folio.dependencies import get_posts_repo, get_posts_service, get_site_generator
from folio.errors import PostError
from folio.settings import settings

logger = logging.getLogger(__name__)


def build_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate the static blog from a directory of markdown posts."
    )
    parser.add_argument("--posts", type=Path, help=f"posts directory (default: {settings.POSTS_DIR})")
    parser.add_argument("--out", type=Path, help=f"output directory (default: {settings.OUTPUT_DIR})")
    parser.add_argument("--workers", type=int, help="threads used to render posts")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    overrides = {}
    if args.posts is not None:
        overrides["POSTS_DIR"] = str(args.posts)
    if args.out is not None:
        overrides["OUTPUT_DIR"] = str(args.out)
    if args.workers is not None:
        overrides["BUILD_WORKERS"] = args.workers
    current_settings = settings.model_copy(update=overrides)

    service = get_posts_service(
        repo=get_posts_repo(current_settings), current_settings=current_settings
    )
    generator = get_site_generator(service=service, current_settings=current_settings)

    try:
        site = generator.generate()
    except (PostError, FileNotFoundError) as e:
        logger.error(f"Build failed: {e}")
        print(f"Build failed: {e}", file=sys.stderr)
        return 1

    generator.write(site, current_settings.output_path)
    print(f"Built {len(site.posts)} posts into {current_settings.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(build_main())
