"""Wizard steps for repoforge."""

from .repo_step import GitRepoStep, RepoStepChoices

__all__ = ["GitRepoStep", "RepoStepChoices"]
