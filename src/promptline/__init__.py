"""promptline: a fast, concurrent shell prompt with git, kubectl and AWS status."""
