"""InstallArch: step-by-step Arch Linux installer.

Core design goals:
- Every step is an independently runnable subcommand
- Fixed ordered pipelines that stop on the first failure
- No rollback and no retry; the operator resumes by step name
- Centralized logging
"""

__version__ = "0.3.0"

__all__ = ["__version__"]
