#!/usr/bin/env python3
"""
CLI script to fetch random dogs from the Dog CEO API.

Usage:
    python -m scripts.fetch_dog --count 3
    python -m scripts.fetch_dog --label https://images.dog.ceo/breeds/hound-afghan/n1.jpg
"""

import argparse
import json
import logging
from typing import Dict, List, Optional, Any

from app.core.config import settings
from app.services.breeds.label_extractor import breed_slug, extract_breed_label, format_breed_slug
from app.services.dogs.dog_api_client import DogApiClient
from app.utils.error_handling import DogApiError

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def fetch_dogs(client: DogApiClient, count: int) -> List[Dict[str, Any]]:
    """
    Fetch ``count`` dogs one after another.

    Args:
        client: Dog API client
        count: Number of fetches

    Returns:
        One dictionary per fetch; failed fetches carry an ``error`` key
    """
    results = []
    for _ in range(count):
        try:
            api_response = client.fetch_random_image()
            breed_name = format_breed_slug(breed_slug(api_response.message))
            results.append({'image_url': api_response.message, 'breed_name': breed_name})
        except DogApiError as e:
            logger.error(f"Fetch failed: {e}")
            results.append({'image_url': None, 'breed_name': None, 'error': str(e)})
    return results


def print_results(results: List[Dict[str, Any]], output_format: str) -> None:
    if output_format == 'json':
        print(json.dumps(results, indent=2))
        return

    for i, result in enumerate(results):
        if 'error' in result:
            print(f"{i+1}. Failed to load image ({result['error']})")
        else:
            print(f"{i+1}. Breed: {result['breed_name']}")
            print(f"   Image: {result['image_url']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(description='Fetch random dog images with their breed')
    parser.add_argument('--count', type=int, default=1,
                        help='Number of dogs to fetch')
    parser.add_argument('--format', choices=['text', 'json'], default='text',
                        help='Output format')
    parser.add_argument('--label', type=str, default=None,
                        help='Only print the breed label of this image URL')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose output')

    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error(f"--count must be at least 1, got {args.count}")

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.label is not None:
        print(extract_breed_label(args.label))
        return 0

    client = DogApiClient(api_url=settings.DOG_API_URL, timeout=settings.REQUEST_TIMEOUT)
    try:
        results = fetch_dogs(client, args.count)
    finally:
        client.close()

    print_results(results, args.format)
    return 1 if any('error' in r for r in results) else 0


if __name__ == "__main__":
    raise SystemExit(main())
