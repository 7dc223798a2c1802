"""Writing generated validators to the file system."""

from pathlib import Path

from .logging_config import get_logger

logger = get_logger(__name__)


class FileWriter:
    """Writes generated source files, creating output directories on demand."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self.written: list[Path] = []

    def write_file(self, output_dir: str | Path, file_name: str, content: str) -> Path:
        """Write one file, replacing any existing file of the same name.

        Args:
            output_dir: Directory receiving the file.
            file_name: File name, e.g. ``UserValidator.cs``.
            content: Text to write; line endings are written unchanged.

        Returns:
            Path of the written file.
        """
        output_dir = Path(output_dir)

        if not output_dir.exists():
            output_dir.mkdir(parents=True)
            logger.info(f"Created output directory: {output_dir}")

        path = output_dir / file_name
        with path.open("w", encoding=self.encoding, newline="") as f:
            f.write(content)

        self.written.append(path)
        logger.info(f"Generated {path}")
        return path

    def write_files(self, output_dir: str | Path, files: dict[str, str]) -> list[Path]:
        """Write several files into one directory, in the given order."""
        return [
            self.write_file(output_dir, file_name, content)
            for file_name, content in files.items()
        ]
