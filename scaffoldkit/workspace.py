"""Workspace bootstrapping and template cloning for Go multi-module workspaces."""

from __future__ import annotations

import os
import posixpath
import subprocess
import sys
from pathlib import Path
from typing import Sequence

WORKSPACE_FILE = "go.work"
REPOSITORY_VARIABLE = "SCAFFOLD_TEMPLATE_REPOSITORY"
DEFAULT_TEMPLATE_REPOSITORY = "example.com/templates"

TEMPLATE_OPTIONS = (
    "hello: a simple hello world",
    "http-client: a simple http client",
    "http-server: a simple http server based on gin",
    "mono: a mono-repo application",
    "nats: a simple nats client",
    "postgres: a simple postgres and postgis client based on sqlc",
    "redis: a simple redis client based on rueidis",
    "valkey: a simple valkey client based on valkey-go",
    "executable: a simple executable application",
    "cassandra: a simple cassandra client based on gocql and gocqlx",
    "s3: a simple s3 client based on minio",
    "mongo: a simple mongo client based on mongo-driver",
    "ollama: a simple ollama client",
    "empty: an empty module",
    "google-ai-studio: a simple google ai studio client",
    "milvus: a simple milvus client",
    "qdrant: a simple qdrant client",
    "docker: a simple docker client",
    "fiber: a simple fiber server",
    "func: a simple azure function http trigger",
    "mssql: a simple mssql client",
    "duckdb: a simple duckdb client",
    "clickhouse: a simple clickhouse client",
    "meilisearch: a simple meilisearch client",
    "zerolog: a simple zerolog initialization",
)


class _WorkspaceUpdateError(OSError):
    """Raised when the module was created but the workspace file could not be updated."""

    def __init__(self, module_path: str, cause: OSError) -> None:
        super().__init__(str(cause))
        self.module_path = module_path


def _template_repository() -> str:
    return os.environ.get(REPOSITORY_VARIABLE, DEFAULT_TEMPLATE_REPOSITORY).rstrip("/")


def read_root_workspace(data: str | bytes) -> str:
    """Return the root repository recorded on the first line of a workspace file."""
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    first_line = data.split("\n", 1)[0]
    return first_line.removeprefix("// ")


def find_workspace(start: str | Path) -> tuple[Path, str]:
    """Walk up from ``start`` to the directory holding the workspace file.

    Returns that directory and the slash-separated path of ``start`` relative
    to it. The filesystem root itself is never searched.
    """
    current = Path(start).resolve()
    parts: list[str] = []
    while True:
        try:
            (current / WORKSPACE_FILE).read_bytes()
        except OSError:
            pass
        else:
            return current, "/".join(parts)
        parts.insert(0, current.name)
        parent = current.parent
        if parent == parent.parent or str(parent).endswith(":\\"):
            raise FileNotFoundError("Failed to find workspace file")
        current = parent


def template_name(option: str) -> str:
    """Return the template name from a ``name: description`` option."""
    return option.split(":", 1)[0]


def init_workspace(root: str, directory: str | Path) -> Path:
    """Run ``go work init`` in ``directory`` and record ``root`` in the workspace file."""
    directory = Path(directory)
    subprocess.run(["go", "work", "init"], cwd=directory, check=True)
    workspace = directory / WORKSPACE_FILE
    data = workspace.read_bytes()
    workspace.write_bytes(("// " + root + "\n").encode("utf-8") + data)
    return workspace


def clone_template(template: str, module_name: str, start: str | Path) -> str:
    """Create a module from ``template`` and add it to the enclosing workspace.

    The template repository is taken from the ``SCAFFOLD_TEMPLATE_REPOSITORY``
    environment variable. Returns the module's path relative to the workspace
    directory.
    """
    directory, relative = find_workspace(start)
    workspace = directory / WORKSPACE_FILE
    data = workspace.read_bytes()
    root = read_root_workspace(data)

    source = _template_repository() + "/" + template.replace("-", "")
    target = posixpath.normpath(posixpath.join(root, relative, module_name))
    subprocess.run(["gonew", source, target], check=True)

    module_path = posixpath.normpath(posixpath.join(relative, posixpath.basename(module_name)))
    try:
        workspace.write_bytes(data + ("\nuse " + module_path).encode("utf-8"))
    except OSError as exc:
        raise _WorkspaceUpdateError(module_path, exc) from exc
    return module_path


def _log(*parts: object) -> None:
    print(*parts, file=sys.stderr)


def _ask(message: str) -> str:
    return input(f"{message}: ").strip()


def _select(message: str, options: Sequence[str]) -> str:
    for number, option in enumerate(options, start=1):
        _log(f"{number:>3}) {option}")
    while True:
        answer = _ask(message)
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        for option in options:
            if answer in (option, template_name(option)):
                return option
        _log("Unknown template:", answer)


def _usage() -> None:
    _log("Usage: gg <command>")
    _log("Commands:")
    _log("  init: Initialize workspace")
    _log("  clone: Clone a repository from template")


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _usage()
        return 0

    command = args[0]
    if command == "init":
        try:
            root = _ask("Enter root workspace repository")
        except (EOFError, KeyboardInterrupt) as exc:
            _log("Failed to get root workspace repository:", exc)
            return 1
        try:
            init_workspace(root, Path.cwd())
        except subprocess.CalledProcessError as exc:
            _log("Failed to initialize workspace:", exc)
            return 1
        except OSError as exc:
            _log("Failed to update workspace data:", exc)
            return 1
    elif command == "clone":
        try:
            find_workspace(Path.cwd())
        except FileNotFoundError as exc:
            _log(exc)
            return 1
        try:
            selected = template_name(_select("Select template", TEMPLATE_OPTIONS))
            module_name = _ask("Enter module name")
        except (EOFError, KeyboardInterrupt):
            return 1
        try:
            clone_template(selected, module_name, Path.cwd())
        except _WorkspaceUpdateError as exc:
            _log("Failed to write workspace data:", exc)
            _log("Please write this line to your go.work file")
            _log("- use " + exc.module_path)
            return 1
        except (subprocess.CalledProcessError, OSError):
            return 1

    _log("Done")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())