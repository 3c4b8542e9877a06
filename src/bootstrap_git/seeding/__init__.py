"""Boilerplate file seeding."""

from .file_seeder import CommandFileSeeder, FileSeeder

__all__ = ["CommandFileSeeder", "FileSeeder"]
