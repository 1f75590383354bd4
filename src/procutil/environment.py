"""Execution-environment probes."""

import os

KUBERNETES_ENV_VAR = "KUBERNETES_PORT"  # pragma: no mutate


def is_kubernetes_pod() -> bool:
    """Return True when running inside a Kubernetes pod.

    Only the presence of ``KUBERNETES_PORT`` is checked; its value (even an
    empty string) is ignored.
    """
    return KUBERNETES_ENV_VAR in os.environ
