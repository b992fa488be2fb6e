"""ripgrep backend (file listing mode)."""

from typing import Sequence

from .protocol import BackendTag, suffix_forms


class RipgrepBackend:
    """Lists files with ``rg -L <dir> --files -g ...``."""

    tag = BackendTag.RG
    binary_name = "rg"

    def build_command(
        self,
        executable: str,
        root_directory: str,
        extensions: Sequence[str],
    ) -> list[str]:
        command = [executable, "-L", root_directory, "--files"]
        for form in suffix_forms(extensions):
            command.extend(["-g", f"*.{form}"])
        return command
