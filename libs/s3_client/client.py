# libs/s3_client/client.py

from __future__ import annotations

import logging
import mimetypes
import os
import uuid

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import APIException

logger = logging.getLogger(__name__)


class UploadError(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "File upload failed"
    default_code = "upload_failed"


# ---------------------------------------------------------------------
# S3 Client (Cloudflare R2)
# ---------------------------------------------------------------------

def _get_s3_client():
    return boto3.client(
        "s3",
        region_name="auto",
        endpoint_url=settings.R2_ENDPOINT,
        aws_access_key_id=settings.R2_ACCESS_KEY,
        aws_secret_access_key=settings.R2_SECRET_KEY,
        config=Config(
            signature_version="s3v4",
            s3={"addressing_style": "path"},
        ),
    )


def build_key(folder: str, filename: str | None) -> str:
    """<folder>/<uuid><ext>: 원본 파일명은 확장자만 유지."""
    _, ext = os.path.splitext(filename or "")
    return f"{folder.strip('/')}/{uuid.uuid4().hex}{ext.lower()}"


def public_url(key: str) -> str:
    base = (settings.R2_PUBLIC_BASE_URL or "").rstrip("/")
    return f"{base}/{key}"


# ---------------------------------------------------------------------
# API
# ---------------------------------------------------------------------

def upload_file(fileobj, folder: str) -> str:
    """
    Django UploadedFile -> R2 업로드 후 공개 URL 반환.
    실패 시 UploadError (DB 쓰기 전에 호출되므로 부분 저장 없음).
    """
    name = getattr(fileobj, "name", None)
    key = build_key(folder, name)
    content_type = (
        getattr(fileobj, "content_type", None)
        or mimetypes.guess_type(name or "")[0]
        or "application/octet-stream"
    )
    try:
        _get_s3_client().upload_fileobj(
            Fileobj=fileobj,
            Bucket=settings.R2_BUCKET,
            Key=key,
            ExtraArgs={"ContentType": content_type},
        )
    except (BotoCoreError, ClientError) as e:
        logger.exception("R2 upload failed: folder=%s key=%s", folder, key)
        raise UploadError() from e

    logger.info("R2 upload ok: key=%s", key)
    return public_url(key)

