"""
NoteKeeper Backend — Account Service
=====================================

What:  Signup and login rules on top of the MemoryStore.
Who:   Called by routes/accounts.py.

Validation order (both operations):
    1. Required-field check → BadRequestError("Invalid request format")
    2. Body decode error    → BadRequestError(<decoder message>)
    3. Store work

Required-field predicates:
    signup  rejects only when name, email AND password are all empty
    login   rejects only when email AND password are both empty
"""

import logging

from notekeeper.exceptions import BadRequestError, UnauthorizedError
from notekeeper.schemas.requests import LoginRequest, SignupRequest
from notekeeper.services.store import MemoryStore

logger = logging.getLogger(__name__)


class AccountService:
    """
    Stateless account operations; the store is passed on every call.

    Error Handling Strategy:
        Input problems raise BadRequestError, unknown credentials raise
        UnauthorizedError. Both propagate to the global handlers in main.py.
    """

    def signup(self, store: MemoryStore, body: SignupRequest) -> int:
        """
        Register a user and return the new user id.

        Any single non-empty field is enough; duplicate emails are accepted.

        Raises:
            BadRequestError: all three fields empty, or the body did not decode
        """
        if body.name == "" and body.email == "" and body.password == "":
            raise BadRequestError(context={"operation": "signup"})
        if body.decode_error:
            raise BadRequestError(message=body.decode_error, context={"operation": "signup"})

        user_id = store.create_user(body.name, body.email, body.password)
        logger.info("User %d signed up", user_id)
        return user_id

    def login(self, store: MemoryStore, body: LoginRequest) -> str:
        """
        Open a session for the first user matching email and password.

        Returns:
            The new session token.

        Raises:
            BadRequestError: email and password both empty, or undecodable body
            UnauthorizedError: no user matches the credentials
        """
        if body.email == "" and body.password == "":
            raise BadRequestError(context={"operation": "login"})
        if body.decode_error:
            raise BadRequestError(message=body.decode_error, context={"operation": "login"})

        user = store.find_user_by_credentials(body.email, body.password)
        if user is None:
            logger.warning("Login rejected: no user matches the supplied credentials")
            raise UnauthorizedError(context={"operation": "login"})

        session_id = store.create_session(user.id)
        logger.info("User %d logged in (session %s)", user.id, session_id)
        return session_id


account_service = AccountService()
