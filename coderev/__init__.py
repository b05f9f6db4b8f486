"""CodeRev - AI code review for snippets and public repositories."""
