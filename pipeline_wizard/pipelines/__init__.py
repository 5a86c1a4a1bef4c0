"""Bundled pipelines: one package per pipeline with schema, migration and spec.yaml."""
