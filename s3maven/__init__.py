"""Resolve and load artifacts from S3-backed maven repositories."""
