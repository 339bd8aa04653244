import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ecoquiz import __version__
from ecoquiz.api.schemas import (
    Challenge,
    ChallengeCompletionOut,
    HealthOut,
    LoginIn,
    ProfileOut,
    Quiz,
    QuizMetaOut,
    QuizResult,
    QuizSubmission,
    RegisterIn,
    TokenOut,
)
from ecoquiz.config import Settings
from ecoquiz.errors import ChallengeNotFound, EcoQuizError, UserNotFound, UsernameTaken
from ecoquiz.services.auth import TokenClaims, TokenSigner
from ecoquiz.services.challenges import complete_challenge
from ecoquiz.services.grading import grade, validate_submission
from ecoquiz.services.ledger import UserPointsLedger
from ecoquiz.storage.memory_store import MemoryStore

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "System", "description": "System and service endpoints"},
    {"name": "Auth", "description": "Registration and bearer token issue"},
    {"name": "Quizzes", "description": "Quiz delivery and grading endpoints"},
    {"name": "Challenges", "description": "Challenge listing and completion"},
    {"name": "Users", "description": "User profile"},
]

_bearer = HTTPBearer(auto_error=False)


# PUBLIC_INTERFACE
def get_store(request: Request) -> MemoryStore:
    """Return the store attached to the running app."""
    return request.app.state.store


# PUBLIC_INTERFACE
def get_ledger(request: Request) -> UserPointsLedger:
    return request.app.state.ledger


# PUBLIC_INTERFACE
def get_signer(request: Request) -> TokenSigner:
    return request.app.state.signer


# PUBLIC_INTERFACE
def current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    signer: TokenSigner = Depends(get_signer),
) -> TokenClaims:
    """
    Resolve the bearer credential to the caller's identity.

    Raises:
        Unauthenticated (401) when no bearer token is sent,
        CredentialInvalid (403) when it does not verify.
    """
    token = credentials.credentials if credentials else None
    return signer.verify(token)


async def _handle_service_error(request: Request, exc: EcoQuizError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None, store: Optional[MemoryStore] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Runtime settings; read from the environment if omitted.
        store: Backing store; a demonstration-seeded one if omitted.

    Returns:
        FastAPI: the configured application. The store, ledger and token
        signer live on ``app.state``.
    """
    if settings is None:
        settings = Settings()
    if store is None:
        store = MemoryStore.with_demo_data()

    if settings.uses_dev_secret:
        logger.warning("ECOQUIZ_TOKEN_SECRET not set; using the development secret")

    app = FastAPI(
        title="EcoQuiz Backend",
        description="Quiz delivery, grading and points for the environmental-education app.",
        version=__version__,
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.ledger = UserPointsLedger(store)
    app.state.signer = TokenSigner(settings.token_secret, settings.token_ttl_seconds)

    # CORS configuration to allow frontend integration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(EcoQuizError, _handle_service_error)

    _register_routes(app)
    return app


def _register_routes(app: FastAPI) -> None:
    @app.get("/", response_model=HealthOut, summary="Health Check", tags=["System"])
    def health_check(store: MemoryStore = Depends(get_store)) -> HealthOut:
        """
        Health check endpoint.

        Returns:
            JSON payload with a 'Healthy' message and the catalog size.
        """
        return HealthOut(message="Healthy", quizzes=len(store.catalog))

    @app.post(
        "/api/auth/register",
        response_model=TokenOut,
        summary="Register a user",
        tags=["Auth"],
    )
    def register(
        body: RegisterIn,
        store: MemoryStore = Depends(get_store),
        signer: TokenSigner = Depends(get_signer),
    ) -> TokenOut:
        """
        Create an account and return a bearer token for it.

        Raises:
            UsernameTaken (400) if the username is already registered.
        """
        try:
            user = store.create_user(body.username, body.email)
        except ValueError:
            raise UsernameTaken()
        token = signer.issue(user.id, user.username)
        return TokenOut(token=token, username=user.username, message="User registered successfully")

    @app.post("/api/auth/login", response_model=TokenOut, summary="Log in", tags=["Auth"])
    def login(
        body: LoginIn,
        store: MemoryStore = Depends(get_store),
        signer: TokenSigner = Depends(get_signer),
    ) -> TokenOut:
        """
        Return a bearer token for the username.

        Notes:
            - Any password is accepted.
            - Unknown usernames are registered on the fly.
        """
        user = store.get_user_by_username(body.username)
        if user is None:
            logger.warning("Login for unknown user %r; auto-registering", body.username)
            try:
                user = store.create_user(body.username, f"{body.username}@demo.com")
            except ValueError:
                # registered concurrently
                user = store.get_user_by_username(body.username)
        token = signer.issue(user.id, user.username)
        return TokenOut(token=token, username=user.username, message="Login successful")

    @app.get(
        "/api/quizzes",
        response_model=List[QuizMetaOut],
        summary="List quizzes",
        description="Returns quiz metadata (id, title, questionCount) in catalog order.",
        tags=["Quizzes"],
    )
    def list_quizzes(
        store: MemoryStore = Depends(get_store),
        claims: TokenClaims = Depends(current_user),
    ) -> List[QuizMetaOut]:
        return [
            QuizMetaOut(id=q.id, title=q.title, question_count=len(q.questions))
            for q in store.catalog.list_all()
        ]

    @app.get(
        "/api/quiz/random",
        response_model=Quiz,
        summary="Get a random quiz",
        description="Returns one quiz picked uniformly at random, answer keys included.",
        tags=["Quizzes"],
    )
    def random_quiz(
        store: MemoryStore = Depends(get_store),
        claims: TokenClaims = Depends(current_user),
    ) -> Quiz:
        return store.catalog.pick_random()

    @app.get(
        "/api/quiz/{quiz_id}",
        response_model=Quiz,
        summary="Get quiz by id",
        tags=["Quizzes"],
    )
    def get_quiz(
        quiz_id: int,
        store: MemoryStore = Depends(get_store),
        claims: TokenClaims = Depends(current_user),
    ) -> Quiz:
        """
        Retrieve a single quiz by identifier.

        Raises:
            QuizNotFound (404) if the quiz is not in the catalog.
        """
        return store.catalog.get(quiz_id)

    @app.post(
        "/api/quiz/submit",
        response_model=QuizResult,
        summary="Submit quiz answers",
        description="Grades the answers, credits the points to the caller and returns the result.",
        tags=["Quizzes"],
    )
    def submit_quiz(
        submission: QuizSubmission,
        store: MemoryStore = Depends(get_store),
        ledger: UserPointsLedger = Depends(get_ledger),
        claims: TokenClaims = Depends(current_user),
    ) -> QuizResult:
        """
        Grade a submission and award its points.

        Notes:
            - With ``quizId`` the answers are graded against that quiz.
            - Without it, a quiz is re-picked at random and graded against,
              which may not be the quiz the client showed.
            - Points are credited before responding; if crediting fails the
              caller gets the error, never the result.
            - A wrong answer count is rejected with 400 (MalformedSubmission);
              a non-integer entry (string, float, boolean) fails request
              validation with 422.
        """
        if submission.quiz_id is None:
            logger.warning("Submission from user %s has no quizId; grading against a random quiz", claims.user_id)
            quiz = store.catalog.pick_random()
        else:
            quiz = store.catalog.get(submission.quiz_id)

        validate_submission(quiz, submission.answers)
        result = grade(quiz, submission.answers)
        ledger.award(claims.user_id, result.points_earned)
        logger.info(
            "User %s scored %d/%d on quiz %s (+%d points)",
            claims.user_id, result.score, result.total_questions, quiz.id, result.points_earned,
        )
        return result

    @app.get(
        "/api/desafios",
        response_model=List[Challenge],
        summary="List challenges",
        tags=["Challenges"],
    )
    def list_challenges(
        store: MemoryStore = Depends(get_store),
        claims: TokenClaims = Depends(current_user),
    ) -> List[Challenge]:
        return store.list_challenges()

    @app.get(
        "/api/desafios/{challenge_id}",
        response_model=Challenge,
        summary="Get challenge by id",
        tags=["Challenges"],
    )
    def get_challenge(
        challenge_id: int,
        store: MemoryStore = Depends(get_store),
        claims: TokenClaims = Depends(current_user),
    ) -> Challenge:
        """
        Retrieve a single challenge.

        Raises:
            ChallengeNotFound (404) if no challenge has that id.
        """
        challenge = store.get_challenge(challenge_id)
        if challenge is None:
            raise ChallengeNotFound()
        return challenge

    @app.post(
        "/api/desafios/{challenge_id}/complete",
        response_model=ChallengeCompletionOut,
        summary="Complete a challenge",
        tags=["Challenges"],
    )
    def complete(
        challenge_id: int,
        store: MemoryStore = Depends(get_store),
        ledger: UserPointsLedger = Depends(get_ledger),
        claims: TokenClaims = Depends(current_user),
    ) -> ChallengeCompletionOut:
        challenge = complete_challenge(store, ledger, claims.user_id, challenge_id)
        return ChallengeCompletionOut(
            message="Challenge completed successfully",
            points_earned=challenge.pontuacao_maxima,
        )

    @app.get(
        "/api/user/profile",
        response_model=ProfileOut,
        summary="Current user profile",
        tags=["Users"],
        status_code=status.HTTP_200_OK,
    )
    def profile(
        store: MemoryStore = Depends(get_store),
        claims: TokenClaims = Depends(current_user),
    ) -> ProfileOut:
        user = store.get_user(claims.user_id)
        if user is None:
            raise UserNotFound()
        return ProfileOut(
            id=user.id,
            username=user.username,
            email=user.email,
            points=user.points,
            completed_challenges=len(user.completed_challenges),
        )

