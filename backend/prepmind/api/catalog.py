from typing import List

from fastapi import APIRouter

from prepmind.constants import DIFFICULTY_LEVELS, DOMAINS, INTERVIEW_FORMATS, SUPPORTED_LANGUAGES
from prepmind.models.schemas import DifficultyOption, DomainOption, FormatOption, LanguageOption

router = APIRouter()

@router.get("/domains", response_model=List[DomainOption])
async def get_domains():
    """Interview domains and the topics offered for each"""
    return DOMAINS

@router.get("/difficulties", response_model=List[DifficultyOption])
async def get_difficulties():
    return DIFFICULTY_LEVELS

@router.get("/formats", response_model=List[FormatOption])
async def get_formats():
    return INTERVIEW_FORMATS

@router.get("/languages", response_model=List[LanguageOption])
async def get_languages():
    return SUPPORTED_LANGUAGES
