"""Helpers for reading CLI output in tests."""

import json


def json_document(output: str) -> dict:
    """Return the last JSON object printed in ``output``.

    Prompts and log lines share the captured output with the document, and a
    prompt without a trailing newline ends up on the same line, so each line
    is parsed from its first ``{``.
    """
    for line in reversed(output.splitlines()):
        if "{" not in line:
            continue
        try:
            return json.loads(line[line.index("{") :])
        except json.JSONDecodeError:
            continue
    raise AssertionError(f"No JSON document found in output:\n{output}")
