from fastapi import APIRouter

from p3_academy.api.routes import auth, coaching, perform, practice, prepare, scenarios, system, voice

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["authentication"])
router.include_router(scenarios.router, prefix="/practice/scenarios", tags=["scenarios"])
router.include_router(practice.router, prefix="/practice", tags=["practice"])
router.include_router(perform.router, prefix="/perform", tags=["perform"])
router.include_router(prepare.router, prefix="/prepare", tags=["prepare"])
router.include_router(coaching.router, prefix="/coaching", tags=["coaching"])
router.include_router(voice.router, prefix="/voice", tags=["voice"])
router.include_router(system.router, tags=["system"])
