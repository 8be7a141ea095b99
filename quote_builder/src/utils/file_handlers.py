from typing import Dict, Any, Iterable, Optional
import json
import os
import re

# Characters that Windows and macOS refuse in exported workbook names
UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')
MAX_FILENAME_LENGTH = 255


def load_json_file(filepath: str) -> Dict[str, Any]:
    """
    Read a JSON data file such as the bundled catalog.

    Args:
        filepath: Path to the JSON file

    Returns:
        Parsed document

    Raises:
        IOError: If the file is missing, unreadable or not valid JSON
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise IOError(f"Catalog data in {filepath} is not valid JSON (line {e.lineno}): {e.msg}") from e
    except OSError as e:
        raise IOError(f"Could not read catalog data from {filepath}: {e.strerror or e}") from e


def get_data_directory() -> str:
    """Directory holding the bundled reference data"""
    current_dir = os.path.dirname(os.path.abspath(__file__))  # src/utils/
    project_root = os.path.dirname(os.path.dirname(current_dir))
    return os.path.join(project_root, 'data')


def cleanup_filename(filename: str) -> str:
    """
    Turn a quote-derived name into a usable file name.

    Project names are free text, so path separators and other reserved
    characters become underscores and the name is shortened to the file
    system limit, keeping the extension.
    """
    filename = UNSAFE_FILENAME_CHARS.sub('_', filename)
    if len(filename) <= MAX_FILENAME_LENGTH:
        return filename

    stem, ext = os.path.splitext(filename)
    return stem[:MAX_FILENAME_LENGTH - len(ext)] + ext


def get_file_extension(filepath: str) -> Optional[str]:
    """Lower-cased extension without the dot, or None"""
    ext = os.path.splitext(filepath)[1]
    return ext[1:].lower() if len(ext) > 1 else None


def validate_file_type(filepath: str, allowed_extensions: Iterable[str]) -> bool:
    """Check an export path against the formats the exporter can write"""
    ext = get_file_extension(filepath)
    return ext is not None and ext in {x.lower().lstrip('.') for x in allowed_extensions}
