import shutil

from fastapi import APIRouter

from studyaid.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    return {"status": "healthy", "service": "studyaid"}


@router.get("/health/ready")
async def readiness_check():
    checks = {}

    # Scanned PDFs need poppler to render and an OCR engine to read
    checks["poppler"] = "available" if shutil.which("pdftoppm") else "missing"
    if settings.ocr_engine == "tesseract":
        tesseract = settings.tesseract_cmd or shutil.which("tesseract")
        checks["tesseract"] = "available" if tesseract else "missing"
    checks["gemini"] = "configured" if settings.gemini_api_key else "offline"

    ocr_ready = all(v == "available" for k, v in checks.items() if k != "gemini")
    return {
        "status": "ready" if ocr_ready else "degraded",
        "mode": "cloud" if settings.gemini_api_key else "offline",
        "checks": checks,
    }
