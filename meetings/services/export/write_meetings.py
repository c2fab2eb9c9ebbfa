import json
import logging
import os
from pathlib import Path
import tempfile

from meetings.domain.schemas.meeting import NormalizedMeeting

logger = logging.getLogger(__name__)

ARTIFACT_MODE = 0o644


def write_meetings(meetings: list[NormalizedMeeting], output_path: str | Path) -> Path:
    """Write meetings as a JSON array, replacing ``output_path`` in one step.

    The payload goes to a temporary file beside the target and is renamed over
    it, so a failed write leaves any previous artifact untouched. Parent
    directories are not created; a missing one raises FileNotFoundError.
    """
    path = Path(output_path)
    payload = json.dumps([meeting.model_dump() for meeting in meetings], ensure_ascii=False)

    tmp = tempfile.NamedTemporaryFile(
        "w",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
        encoding="utf-8",
    )
    try:
        with tmp:
            tmp.write(payload)
        os.chmod(tmp.name, ARTIFACT_MODE)
        os.replace(tmp.name, path)
    except BaseException:
        Path(tmp.name).unlink(missing_ok=True)
        raise

    logger.info("Wrote %d meetings to %s", len(meetings), path)
    return path
