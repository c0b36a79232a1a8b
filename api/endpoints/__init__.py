from fastapi import APIRouter

from . import webinars


ROUTERS: list[APIRouter] = [webinars.router]
