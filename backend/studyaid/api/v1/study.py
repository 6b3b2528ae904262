from fastapi import APIRouter, Depends

from studyaid.dependencies import get_study_service
from studyaid.schemas.study import (
    ExplainRequest,
    ExplainResponse,
    FlashcardResponse,
    MCQResponse,
    SummaryResponse,
    TextRequest,
)
from studyaid.services.study_service import StudyService

router = APIRouter(prefix="/study", tags=["Study"])


@router.post("/summary", response_model=SummaryResponse)
def summarize(request: TextRequest, study: StudyService = Depends(get_study_service)):
    return SummaryResponse(summary=study.summarize(request.text), mode=study.mode)


@router.post("/mcqs", response_model=MCQResponse)
def generate_mcqs(request: TextRequest, study: StudyService = Depends(get_study_service)):
    return MCQResponse(questions=study.generate_mcqs(request.text), mode=study.mode)


@router.post("/flashcards", response_model=FlashcardResponse)
def generate_flashcards(request: TextRequest, study: StudyService = Depends(get_study_service)):
    return FlashcardResponse(flashcards=study.generate_flashcards(request.text), mode=study.mode)


@router.post("/explain", response_model=ExplainResponse)
def explain(request: ExplainRequest, study: StudyService = Depends(get_study_service)):
    return ExplainResponse(
        explanation=study.explain(request.topic, request.context),
        mode=study.mode,
    )
