"""Chunked media upload and upload status endpoints."""

from __future__ import annotations

import base64
import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .api import Requester

# No size is mandated for a chunk; one mebibyte is convenient.
CHUNK_SIZE = 1024 * 1024

# Largest upload the service documents accepting.
MAX_SIZE = 15 * 1024 * 1024


def _known(cls, data: Mapping[str, Any]) -> dict[str, Any]:
    names = {f.name for f in dataclasses.fields(cls)}
    return {key: value for key, value in data.items() if key in names and value is not None}


def _always(key: str, default: Any) -> Any:
    return field(default=default, metadata={"key": key, "omitempty": False})


@dataclass
class MediaVideoInfo:
    """Information about media identified as video."""

    video_type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MediaVideoInfo:
        return cls(**_known(cls, data))


@dataclass
class MediaProcessingError:
    """Why background processing of an upload failed."""

    code: int = 0
    name: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MediaProcessingError:
        return cls(**_known(cls, data))


@dataclass
class MediaProcessingInfo:
    """Progress of background processing of an upload."""

    state: str = ""
    check_after_secs: int = 0
    progress_percent: int = 0
    error: Optional[MediaProcessingError] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MediaProcessingInfo:
        values = _known(cls, data)
        if "error" in values:
            values["error"] = MediaProcessingError.from_dict(values["error"])
        return cls(**values)


def _media_extras(values: dict[str, Any]) -> dict[str, Any]:
    if "video" in values:
        values["video"] = MediaVideoInfo.from_dict(values["video"])
    if "processing_info" in values:
        values["processing_info"] = MediaProcessingInfo.from_dict(values["processing_info"])
    return values


@dataclass
class MediaUploadResult:
    """A completed upload; it may still be processing in the background."""

    media_id: int = 0
    media_id_string: str = ""
    size: int = 0
    expires_after_secs: int = 0
    video: Optional[MediaVideoInfo] = None
    processing_info: Optional[MediaProcessingInfo] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MediaUploadResult:
        return cls(**_media_extras(_known(cls, data)))


@dataclass
class MediaStatusResult:
    """Current status of an uploaded piece of media."""

    media_id: int = 0
    media_id_string: str = ""
    expires_after_secs: int = 0
    processing_info: Optional[MediaProcessingInfo] = None
    video: Optional[MediaVideoInfo] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MediaStatusResult:
        return cls(**_media_extras(_known(cls, data)))


@dataclass
class _InitParams:
    total_bytes: int = _always("total_bytes", 0)
    media_type: str = _always("media_type", "")
    command: str = _always("command", "INIT")


@dataclass
class _AppendParams:
    media_id: int = _always("media_id", 0)
    media_data: str = _always("media_data", "")
    segment_index: int = _always("segment_index", 0)
    command: str = _always("command", "APPEND")


@dataclass
class _FinalizeParams:
    media_id: int = _always("media_id", 0)
    command: str = _always("command", "FINALIZE")


@dataclass
class _StatusParams:
    media_id: int = _always("media_id", 0)
    command: str = _always("command", "STATUS")


class MediaService:
    """Access to the media upload endpoints."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester.with_path("media/")

    def upload(self, media: bytes, media_type: str) -> MediaUploadResult:
        """Upload ``media`` of MIME type ``media_type`` in chunks.

        Some media is processed in the background; the result then carries
        ``processing_info`` and ``status`` can be polled with its media id.
        Raises ValueError if the media is larger than MAX_SIZE.
        """
        size = len(media)
        if size > MAX_SIZE:
            raise ValueError(f"file size of {size} exceeds twitter maximum {MAX_SIZE}")

        init, _ = self._requester.post(
            "upload.json", _InitParams(total_bytes=size, media_type=media_type)
        )
        media_id = (init or {}).get("media_id") or 0

        for segment in range(size // CHUNK_SIZE + 1):
            chunk = media[segment * CHUNK_SIZE : (segment + 1) * CHUNK_SIZE]
            self._requester.post(
                "upload.json",
                _AppendParams(
                    media_id=media_id,
                    media_data=base64.b64encode(chunk).decode("ascii"),
                    segment_index=segment,
                ),
            )

        data, _ = self._requester.post("upload.json", _FinalizeParams(media_id=media_id))
        return MediaUploadResult.from_dict(data or {})

    def status(self, media_id: int) -> MediaStatusResult:
        """Return the processing status of an uploaded piece of media."""
        data, _ = self._requester.get("upload.json", _StatusParams(media_id=media_id))
        return MediaStatusResult.from_dict(data or {})