from fastapi import APIRouter

from app.core import DictionaryController

from .dictionaries import build_router as build_dictionaries_router

__all__ = ["get_routers"]


def get_routers(controller: DictionaryController) -> list[APIRouter]:
    return [build_dictionaries_router(controller)]
