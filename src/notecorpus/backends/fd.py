"""fd backend, installed as ``fd`` or as ``fdfind`` on Debian derivatives."""

from typing import Sequence

from .protocol import BackendTag, suffix_forms


class FdBackend:
    """Lists files with ``fd -L --type file -e ... . <dir>``."""

    tag = BackendTag.FD
    binary_name = "fd"

    def build_command(
        self,
        executable: str,
        root_directory: str,
        extensions: Sequence[str],
    ) -> list[str]:
        command = [executable, "-L", "--type", "file"]
        for form in suffix_forms(extensions):
            command.extend(["-e", form])
        # "." matches every name; filtering is done by the -e flags
        command.extend([".", root_directory])
        return command


class FdFindBackend(FdBackend):
    """Same command line as fd, different binary name."""

    tag = BackendTag.FDFIND
    binary_name = "fdfind"
