"""
Example: diff two in-memory JSON documents and print the report.

Run this with:
    python examples/compare_configs.py

The same report is produced from files with:
    jsondelta old.json new.json
"""

import json

from jsondelta import DiffPolicy, diff_documents, json_diff
from jsondelta.render import make_console, render_report

OLD = """{
  "service": "api",
  "replicas": 2,
  "env": {"LOG_LEVEL": "info", "TIMEOUT": 30},
  "ports": [80, 443]
}
"""

NEW = """{
  "ports": [80, 443, 8080],
  "service": "api",
  "env": {"LOG_LEVEL": "debug", "TIMEOUT": 30, "RETRIES": 3},
  "region": "eu-west-1"
}
"""


def main() -> None:
    old, new = json.loads(OLD), json.loads(NEW)

    # Flat records, depth-first
    for record in json_diff(old, new):
        print(record.change.value, record.path)
    print()

    report = diff_documents(old, new, OLD, NEW, DiffPolicy.default())
    render_report(report, make_console())


if __name__ == "__main__":
    main()
