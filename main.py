import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import settings
from bank import CourseOutcomeList, QuestionRepository
from routers import course_outcomes, generation, questions

logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_TITLE)

    # One bank per app instance
    app.state.repository = QuestionRepository()
    app.state.outcomes = CourseOutcomeList()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Attach the endpoints
    app.include_router(course_outcomes.router)
    app.include_router(questions.router)
    app.include_router(generation.router)

    @app.get("/")
    def read_root():
        return {"status": "Online"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
