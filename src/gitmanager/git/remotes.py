def parse_remote_list(output: str) -> list[str]:
    """Parse `git remote` output into remote names, in the order git lists them."""
    return [line.strip() for line in output.splitlines() if line.strip()]
