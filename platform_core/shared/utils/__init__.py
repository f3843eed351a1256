"""Shared utilities: generators."""

from platform_core.shared.utils.generators import generate_cuid, generate_hash_key

__all__ = ["generate_cuid", "generate_hash_key"]
