"""
Kbake renders Helm charts, Docker Compose files and Kustomize overlays into a single flattened Kubernetes manifest
file and hands the file's path to the downstream steps of a CI/CD pipeline.
"""

__version__ = "0.1.0"
