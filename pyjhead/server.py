# pyjhead/server.py
from fastapi import FastAPI, File, UploadFile, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse
from pathlib import Path
import logging
import uuid

from pyjhead import __version__
from pyjhead.command import JheadError, JheadNotFound, jhead_version
from pyjhead.jhead import Jhead
from pyjhead.settings import UPLOAD_DIR, OUTPUT_DIR, ALLOWED_EXTENSIONS, MAX_FILE_SIZE
from pyjhead.utils.cleanup import cleanup_once, start_background_cleanup
from pyjhead.utils.signature import detect_extension, ext_equivalent

logger = logging.getLogger(__name__)

UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

app = FastAPI(title="jhead inspector")


@app.on_event("startup")
def bootstrap():
    start_background_cleanup(interval_seconds=120)


@app.get("/")
def home():
    try:
        version = jhead_version()
    except JheadError:
        version = None
    return {"name": "pyjhead", "version": __version__, "jhead_version": version}


def _secure_ext(filename: str) -> str:
    return Path(filename or "").suffix.lower()


async def _validate_and_read(upload_file: UploadFile) -> bytes:
    ext = _secure_ext(upload_file.filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(status_code=400, detail=f"Extension {ext} not allowed.")

    data = await upload_file.read()
    if len(data) > MAX_FILE_SIZE:
        raise HTTPException(status_code=400, detail=f"File too large. Limit is {MAX_FILE_SIZE} bytes.")

    detected = detect_extension(data)
    if detected is None or not ext_equivalent(ext, detected):
        raise HTTPException(status_code=400, detail="File is not a JPEG.")
    return data


def _jhead_failure(filename: str, e: JheadError) -> HTTPException:
    logger.error("jhead failed on %s: %s", filename, e)
    if isinstance(e, JheadNotFound):
        return HTTPException(status_code=500, detail="Server missing jhead.")
    return HTTPException(status_code=422, detail=str(e))


@app.post("/inspect")
async def inspect(upload: UploadFile = File(...)):
    data = await _validate_and_read(upload)
    tmp = UPLOAD_DIR / f"inspect_{uuid.uuid4().hex}{_secure_ext(upload.filename)}"
    tmp.write_bytes(data)
    try:
        # uploads may carry IPTC or maker sections with labels outside TAGS
        report = await run_in_threadpool(lambda: Jhead(tmp, strict=False).data)
    except JheadError as e:
        raise _jhead_failure(upload.filename, e) from e
    finally:
        tmp.unlink(missing_ok=True)
        cleanup_once()
    # jhead reports our temp name, not the uploaded one
    report.pop("file_name", None)
    return {"filename": upload.filename, "data": report}


@app.post("/clean")
async def clean(upload: UploadFile = File(...)):
    data = await _validate_and_read(upload)
    ext = _secure_ext(upload.filename)
    dst = OUTPUT_DIR / f"{uuid.uuid4().hex}_{Path(upload.filename).stem}_clean{ext}"
    dst.write_bytes(data)
    try:
        await run_in_threadpool(Jhead(dst).pure_jpg)
    except JheadError as e:
        dst.unlink(missing_ok=True)
        raise _jhead_failure(upload.filename, e) from e
    finally:
        cleanup_once()
    return {
        "orig": upload.filename,
        "cleaned_name": dst.name,
        "download": f"/download/{dst.name}",
    }


@app.get("/download/{name}")
def download(name: str):
    path = OUTPUT_DIR / name
    if path.parent != OUTPUT_DIR or not path.is_file():
        raise HTTPException(status_code=404, detail="File not found (maybe it expired and was deleted).")
    return FileResponse(path, media_type="image/jpeg", filename=name)
