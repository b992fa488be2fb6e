"""POSIX find(1) backend."""

from typing import Sequence

from .protocol import BackendTag, suffix_forms


class FindBackend:
    """Lists files with ``find -L <dir> -type f ( -name ... -o ... )``."""

    tag = BackendTag.FIND
    binary_name = "find"

    def build_command(
        self,
        executable: str,
        root_directory: str,
        extensions: Sequence[str],
    ) -> list[str]:
        name_clauses: list[str] = []
        for form in suffix_forms(extensions):
            if name_clauses:
                name_clauses.append("-o")
            name_clauses.extend(["-name", f"*.{form}"])

        return [executable, "-L", root_directory, "-type", "f", "(", *name_clauses, ")"]
