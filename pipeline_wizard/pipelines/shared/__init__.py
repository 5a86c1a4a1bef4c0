"""Blocks shared by several pipelines."""

from .ci import CIAsset, CIConfig

__all__ = ['CIAsset', 'CIConfig']
