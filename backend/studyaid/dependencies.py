from studyaid.services.document_service import DocumentService
from studyaid.services.study_service import StudyService


def get_document_service() -> DocumentService:
    return DocumentService()


def get_study_service() -> StudyService:
    return StudyService()
