"""
podbuild - drive podman image builds from a build pipeline.

Builds, tags, saves, pushes and removes container images and logs in to
registries by running the podman binary.
"""

__all__ = ["__version__"]

__version__ = "0.3.0"
