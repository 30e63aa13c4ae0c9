"""Registry data structures and INI (de)serialization.

The registry is an ordered mapping of local path -> Entry, persisted at the
repository root as:

    [<local_path>]
    remote=<uri>
    file_path=<path within remote>
    sha=<commit id>
"""

import configparser
import io
from collections.abc import Iterator
from dataclasses import dataclass

REMOTE_KEY = "remote"
FILE_PATH_KEY = "file_path"
SHA_KEY = "sha"


@dataclass(frozen=True)
class Entry:
    """One tracked file.

    Fields loaded from a hand-edited registry may be empty strings when the
    corresponding key is missing.
    """

    local_path: str
    remote_uri: str
    remote_file_path: str
    resolved_sha: str

    @property
    def file_id(self) -> str:
        return format_file_id(self.remote_uri, self.remote_file_path, self.resolved_sha)


def format_file_id(remote_uri: str, remote_file_path: str, revision: str | None) -> str:
    """Identity used in error messages: "<remote>:<path>@<revision>"."""
    return f"{remote_uri}:{remote_file_path}@{revision if revision else 'HEAD'}"


class Registry:
    """Ordered collection of entries keyed by local path.

    Mutations keep insertion order; replacing an entry keeps its position.
    """

    def __init__(self, entries: list[Entry] | None = None) -> None:
        self._entries: dict[str, Entry] = {}
        for entry in entries or []:
            self.upsert(entry)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Registry):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    def __repr__(self) -> str:
        return f"Registry({list(self._entries.values())!r})"

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, local_path: object) -> bool:
        return local_path in self._entries

    def local_paths(self) -> list[str]:
        return list(self._entries)

    def get(self, local_path: str) -> Entry | None:
        return self._entries.get(local_path)

    def upsert(self, entry: Entry) -> None:
        self._entries[entry.local_path] = entry

    def delete(self, local_path: str) -> bool:
        """Remove the entry for local_path; returns False if there was none."""
        return self._entries.pop(local_path, None) is not None


def _new_parser() -> configparser.ConfigParser:
    # No interpolation: remote URIs may legitimately contain '%'.
    # An INI header cannot be empty, so every section (including [DEFAULT]) is an entry.
    return configparser.ConfigParser(interpolation=None, strict=False, default_section="")


def parse_registry(content: str) -> Registry:
    """Parse registry INI text.

    Raises:
        configparser.Error: If the text is not valid INI
    """
    parser = _new_parser()
    parser.read_string(content)

    registry = Registry()
    for section in parser.sections():
        values = parser[section]
        registry.upsert(
            Entry(
                local_path=section,
                remote_uri=values.get(REMOTE_KEY, ""),
                remote_file_path=values.get(FILE_PATH_KEY, ""),
                resolved_sha=values.get(SHA_KEY, ""),
            )
        )
    return registry


def serialize_registry(registry: Registry) -> str:
    """Render a registry as INI text, one section per entry in registry order."""
    parser = _new_parser()
    for entry in registry:
        parser[entry.local_path] = {
            REMOTE_KEY: entry.remote_uri,
            FILE_PATH_KEY: entry.remote_file_path,
            SHA_KEY: entry.resolved_sha,
        }

    output = io.StringIO()
    parser.write(output, space_around_delimiters=False)
    content = output.getvalue().rstrip()
    if not content:
        return ""
    return content + "\n"
