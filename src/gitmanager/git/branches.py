from dataclasses import dataclass

# Markers git prints before a branch name: "*" for the checked-out branch and
# "+" for a branch checked out in another worktree.
BRANCH_MARKERS = ("*", "+")

# Matched case-insensitively against `git branch -d` failure output. This is a
# heuristic over human-readable text, so a git upgrade or a non-English locale
# can stop it from matching.
FORCE_REQUIRED_PATTERNS: tuple[str, ...] = ("not fully merged",)


@dataclass(frozen=True)
class DeleteResult:
    success: bool
    message: str
    require_force: bool = False


def parse_branch_list(output: str) -> list[str]:
    """
    Parse `git branch` output into branch names.

    Blank lines are dropped and the active-branch marker is stripped, so
    "  main\\n* feature\\n" becomes ["main", "feature"].
    """
    branches: list[str] = []
    for raw_line in output.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line[0] in BRANCH_MARKERS:
            line = line[1:].strip()
        if line:
            branches.append(line)
    return branches


def requires_force(detail: str) -> bool:
    lowered = detail.lower()
    return any(pattern in lowered for pattern in FORCE_REQUIRED_PATTERNS)


def delete_flag(force: bool) -> str:
    return "-D" if force else "-d"
