"""
MUST HAVE REQUIREMENTS:
- Accept an optional submission folder (default resposta under the cwd) and prefer the virtualenv python if present.
- Run the gate scripts first (single .html file, then readable) and stop at the first failing gate.
- Take the single file path from the last output line of check_single_file.py as target for every later check.
- Run every remaining check script on the target, even after failures.
- Print one PASS/FAIL line per check and a summary; exit 0 only when every check passed.
"""
import os
import subprocess
import sys
from collections import namedtuple

CheckResult = namedtuple("CheckResult", "name passed message")
SUBMISSION_DIR = "resposta"

root = os.path.dirname(os.path.abspath(__file__))
venv_py = os.path.join(root, ".venv", "bin", "python3")
python = venv_py if os.path.exists(venv_py) else sys.executable
gates = [
    "submission_checks/check_single_file.py",
    "submission_checks/check_readable.py",
]
checks = [
    "submission_checks/check_valid_parse.py",
    "submission_checks/check_basic_structure.py",
    "submission_checks/check_doctype.py",
    "submission_checks/check_body_children.py",
    "submission_checks/check_min_tags.py",
    "submission_checks/check_no_extra_tags.py",
    "submission_checks/check_closed_tags.py",
    "submission_checks/check_non_empty.py",
]


def run(rel, target):
    name = os.path.basename(rel)[len("check_"):-len(".py")]
    path = os.path.join(root, rel)
    proc = subprocess.run([python, path, target], text=True, capture_output=True)
    out = (proc.stdout + proc.stderr).strip()
    return CheckResult(name, proc.returncode == 0, out)


def report(results):
    for r in results:
        if r.passed:
            print(f"PASS {r.name}")
        else:
            print(f"FAIL {r.name}: {r.message}")
    failed = sum(1 for r in results if not r.passed)
    print(f"{len(results) - failed} passed, {failed} failed")
    return 1 if failed else 0


target = sys.argv[1] if len(sys.argv) > 1 else os.path.join(os.getcwd(), SUBMISSION_DIR)
results = []
for rel in gates:
    result = run(rel, target)
    results.append(result)
    if not result.passed:
        sys.exit(report(results))
    if rel.endswith("check_single_file.py"):
        target = result.message.splitlines()[-1]

for rel in checks:
    results.append(run(rel, target))

sys.exit(report(results))
