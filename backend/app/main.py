#!/usr/bin/env python3
"""
Main FastAPI application for the Nigerian voter-education chatbot.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Config
from .controller import Controller, CHAT_APOLOGY
from .generate import GenerationClient
from ..data.database import build_engine, build_session_factory, create_tables
from ..data.log_store import save_feedback
from ..data.populate_db import populate_voter_info
from ..schemas.io_models import ChatRequest, ChatResponse, FeedbackRequest, FeedbackResponse, HealthResponse
from ..utils.logger import get_logger

logger = get_logger("api")

FEEDBACK_THANKS = "Thanks for your feedback! It helps us improve voter education in Nigeria. 😊"
FEEDBACK_FAILED = "Oops, feedback save failed. Try again?"
HEALTH_STATUS = "All good! Server + Groq ready for Nigerian voter chats 🚀"


def get_db(request: Request):
    """Dependency to get a database session."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_controller(request: Request) -> Controller:
    return request.app.state.controller


def create_app(database_url: Optional[str] = None, gen_client: Optional[GenerationClient] = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        database_url: SQLAlchemy URL, defaults to Config.DATABASE_URL
        gen_client: Completion client, defaults to a Groq client from Config

    Returns:
        App whose lifespan creates tables, seeds facts and wires the controller
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Config.debug_print()
        engine = build_engine(database_url)
        app.state.session_factory = build_session_factory(engine)
        app.state.controller = Controller(gen_client=gen_client)
        try:
            create_tables(engine)
            logger.info("Connected to database")
        except Exception:
            logger.exception("Database connection error; chat and feedback will fail until it is reachable")
        else:
            try:
                populate_voter_info(app.state.session_factory)
            except Exception:
                logger.warning("Starting without seed data; fact lookups fall back to generic context")
        yield
        engine.dispose()

    app = FastAPI(
        title="Voter Education Chatbot API",
        description="Nigerian voter-education Q&A backed by canned facts and Groq",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.post("/api/chat", response_model=ChatResponse)
    def chat(request: ChatRequest, db=Depends(get_db), controller: Controller = Depends(get_controller)):
        """Answer one voter-education question."""
        try:
            result = controller.handle_query(db, request.message)
            return ChatResponse(response=result["response"])
        except Exception:
            logger.exception("Error with Groq or DB")
            return JSONResponse(status_code=500, content={"response": CHAT_APOLOGY})

    @app.post("/api/feedback", response_model=FeedbackResponse)
    def feedback(request: FeedbackRequest, db=Depends(get_db)):
        """Store a rating/comment about a bot answer."""
        try:
            save_feedback(
                db,
                user_message=request.user_message,
                bot_response=request.bot_response,
                rating=request.rating,
                comment=request.comment,
            )
            return FeedbackResponse(message=FEEDBACK_THANKS)
        except Exception:
            logger.exception("Error saving feedback")
            return JSONResponse(status_code=500, content={"message": FEEDBACK_FAILED})

    @app.get("/api/health", response_model=HealthResponse)
    def health_check():
        """Health check endpoint."""
        return HealthResponse(status=HEALTH_STATUS)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Server starting on port {Config.port()}, let's get Nigerians voting!")
    uvicorn.run(app, host="0.0.0.0", port=Config.port())
