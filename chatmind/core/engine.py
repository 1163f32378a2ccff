"""Core message orchestration for one conversation.

Architectural role:
    `ChatSession.process_message` is the single inbound entry point used by the CLI
    and HTTP adapters. It turns one raw user message into reply text and updates the
    session's conversation state.

Control-flow model:
    1. Remote pre-stage: when a remote backend is configured, ask it first under a
       bounded timeout. A usable reply ends the turn; the local classifier is not
       run.
    2. Local pipeline:
       a. Lexical analysis (`LexicalAnalyzer`).
       b. Classification against the prior context snapshot (`IntentClassifier`).
       c. Profile update: expertise, communication style, interests.
       d. Response rendering (`ResponseGenerator`).
       e. Turn recording: history, session topics, interaction memory.

Concurrency:
    Turns of one session are serialized with an `asyncio.Lock`. The blocking remote
    call runs on `REMOTE_EXECUTOR` inside `asyncio.wait_for`. A timed-out call is
    abandoned: the turn returns as soon as the timeout fires, and the late result is
    never committed to the remote history because `RemoteChatBackend.commit` is only
    reached on success.

Error handling strategy:
    - Remote failures (`RemoteBackendError`, timeouts) are logged and the turn falls
      back to the local pipeline.
    - Any other failure is logged with `logger.exception` and the user receives the
      fixed apology text. `process_message` never raises.

Side effects:
    Mutates only this session's `ConversationContext` and remote history.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor

from chatmind.core.analysis_types import AnalysisResult, Utterance
from chatmind.llm.exceptions import RemoteBackendError
from chatmind.llm.provider_config import REMOTE_TIMEOUT_SECONDS
from chatmind.llm.service import RemoteChatBackend
from chatmind.memory.conversation_context import ConversationContext, Turn
from chatmind.nlp.intent_classifier import IntentClassifier
from chatmind.nlp.lexical_analyzer import LexicalAnalyzer
from chatmind.prompting.response_generator import ResponseGenerator
from chatmind.prompting.templates import APOLOGY, GENERIC_CAPABILITIES


logger = logging.getLogger(__name__)

# Separate from the loop's default executor, which `asyncio.run` joins on exit.
REMOTE_WORKERS = 8
REMOTE_EXECUTOR = ThreadPoolExecutor(max_workers=REMOTE_WORKERS, thread_name_prefix="chatmind-remote")


class ChatSession:
    """Independent conversation with its own context, randomness and remote history."""

    def __init__(
        self,
        analyzer: LexicalAnalyzer | None = None,
        classifier: IntentClassifier | None = None,
        generator: ResponseGenerator | None = None,
        context: ConversationContext | None = None,
        remote: RemoteChatBackend | None = None,
        remote_timeout: float = REMOTE_TIMEOUT_SECONDS,
    ):
        self.analyzer = analyzer or LexicalAnalyzer()
        self.classifier = classifier or IntentClassifier()
        self.generator = generator or ResponseGenerator()
        self.context = context if context is not None else ConversationContext()
        self.remote = remote
        self.remote_timeout = remote_timeout
        self._lock = asyncio.Lock()

    @classmethod
    def from_env(cls, **kwargs) -> "ChatSession":
        """Build a session with the remote backend enabled when a credential is configured."""
        remote = RemoteChatBackend()
        if not remote.is_configured():
            logger.info("No remote credential configured; running in local-only mode")
            remote = None
        return cls(remote=remote, **kwargs)

    # -----------------------------------------------------
    # Entry point
    # -----------------------------------------------------

    async def process_message(self, raw_text) -> str:
        """Process one user message and return non-empty reply text.

        Edge cases:
            - `None` is treated as empty text.
            - Empty text skips the remote stage and yields the generic local reply.
            - Internal failures return `APOLOGY`.
        """
        async with self._lock:
            try:
                utterance = Utterance(text="" if raw_text is None else str(raw_text))

                reply = await self._ask_remote(utterance)
                if reply is not None:
                    self.context.record(Turn(
                        user_text=utterance.text,
                        response_text=reply,
                        timestamp=utterance.received_at,
                    ))
                    return reply

                return self._respond_locally(utterance)

            except Exception:
                logger.exception("Message processing failed")
                return APOLOGY

    # -----------------------------------------------------
    # Remote pre-stage
    # -----------------------------------------------------

    async def _ask_remote(self, utterance: Utterance) -> str | None:
        if self.remote is None or not self.remote.is_configured():
            return None
        if not utterance.text.strip():
            return None

        try:
            loop = asyncio.get_running_loop()
            reply = await asyncio.wait_for(
                loop.run_in_executor(REMOTE_EXECUTOR, self.remote.generate, utterance.text),
                timeout=self.remote_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("Remote backend timed out after %.1fs; using local pipeline", self.remote_timeout)
            return None
        except RemoteBackendError as err:
            logger.warning("Remote backend failed (%s); using local pipeline", err)
            return None
        except Exception:
            logger.exception("Unexpected remote backend failure; using local pipeline")
            return None

        if not isinstance(reply, str) or not reply.strip():
            logger.warning("Remote backend returned an empty reply; using local pipeline")
            return None

        self.remote.commit(utterance.text, reply)
        return reply

    # -----------------------------------------------------
    # Local pipeline
    # -----------------------------------------------------

    def analyze(self, text: str) -> AnalysisResult:
        """Classify `text` against the current context without changing it."""
        features = self.analyzer.analyze(text)
        return self.classifier.classify(text, features, self.context)

    def respond_locally(self, text: str) -> str:
        return self._respond_locally(Utterance(text=text))

    def _respond_locally(self, utterance: Utterance) -> str:
        text = utterance.text
        analysis = self.analyze(text)

        logger.debug(
            "intent=%s confidence=%.2f topics=%s complexity=%s",
            analysis.intent.value,
            analysis.confidence,
            list(analysis.topics),
            analysis.complexity.value,
        )

        self.context.update_expertise(analysis.topics)
        self.context.update_style(analysis.complexity)
        self.context.add_interests(analysis.topics)

        response = self.generator.generate(text, analysis, self.context)
        if not response or not response.strip():
            response = GENERIC_CAPABILITIES

        turn = Turn(
            user_text=text,
            response_text=response,
            timestamp=utterance.received_at,
            topics=analysis.topics,
        )
        self.context.record(turn)
        self.context.remember_interaction(turn, analysis)

        return response

    # -----------------------------------------------------
    # Session control
    # -----------------------------------------------------

    def reset(self) -> None:
        """Forget the conversation: context and remote history."""
        self.context.reset()
        if self.remote is not None:
            self.remote.clear_history()
