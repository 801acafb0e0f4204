#!/usr/bin/env python3
"""Script to list every repository in a Bitbucket Server project."""

import logging
import sys
import os

# Add the project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bitbucket_rest.application.bitbucket_api import BitbucketApi

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main(argv=None):
    """List the repositories of the project given as first argument."""
    argv = sys.argv[1:] if argv is None else argv
    project_key = argv[0] if argv else os.getenv("BITBUCKET_PROJECT_KEY")
    if not project_key:
        logger.error("Usage: list_repositories.py PROJECT_KEY (or set BITBUCKET_PROJECT_KEY)")
        return 2

    if not os.getenv("BITBUCKET_REST_CREDENTIALS"):
        logger.warning("BITBUCKET_REST_CREDENTIALS not found. Using anonymous access.")

    api = BitbucketApi()
    try:
        project = api.project_api().get(project_key)
        if project.errors:
            logger.error(f"Project {project_key} not available: {[err.message for err in project.errors]}")
            return 1

        count = 0
        for repository in api.iter_repositories(project_key):
            logger.info(f"{project_key}/{repository.slug} ({repository.state})")
            count += 1

        logger.info(f"Found {count} repositories in {project_key}")
        return 0

    except Exception as e:
        logger.error(f"Listing failed: {e}", exc_info=True)
        return 1
    finally:
        api.close()


if __name__ == "__main__":
    sys.exit(main())
