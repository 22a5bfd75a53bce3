"""KubeDeck - live Kubernetes workload topology console."""

__version__ = "0.1.0"
