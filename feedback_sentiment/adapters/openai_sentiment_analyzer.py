# adapters/openai_sentiment_analyzer.py

"""
OpenAI-based sentiment analyzer using LangChain with structured output.
"""

import asyncio
import math
import time
from typing import Dict, Literal, Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, Field

from ..interfaces.sentiment_analyzer import SentimentAnalyzer, SentimentAnalysisError
from ..models.sentiment import RemoteSentimentResult, SentimentLabel
from common.logger import LoggerFactory, LoggerType, LogLevel

logger = LoggerFactory.get_logger(
    name="openai-sentiment-analyzer",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)

DEFAULT_SCORE = 0.5
DEFAULT_CONFIDENCE = 0.8


class SentimentOutput(BaseModel):
    """Structured output for feedback sentiment analysis."""

    sentiment: Literal["positive", "negative", "neutral"] = Field(
        description="Overall sentiment: positive, negative, or neutral"
    )
    score: Optional[float] = Field(
        None,
        description="Sentiment intensity (0.0 = very negative, 1.0 = very positive)",
    )
    confidence: Optional[float] = Field(
        None, description="Confidence in the analysis (0.0 to 1.0)"
    )


def _unit_or_default(value: Optional[float], default: float) -> float:
    """Clamp to [0, 1]; zero, missing or NaN values use the default."""
    if not value or math.isnan(value):
        return default
    return max(0.0, min(1.0, value))


class OpenAISentimentAnalyzer(SentimentAnalyzer):
    """
    OpenAI-powered sentiment analyzer using LangChain with structured output.

    The reply is validated against SentimentOutput. Any transport,
    timeout or parsing problem surfaces as SentimentAnalysisError so callers
    can switch to the heuristic scorer.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.0,
        max_tokens: int = 200,
        max_retries: int = 2,
        timeout: float = 15.0,
        base_url: Optional[str] = None,
        backoff_seconds: float = 1.0,
    ):
        """
        Initialize OpenAI sentiment analyzer.

        Args:
            api_key: OpenAI API key
            model: Model name to use
            temperature: Model temperature
            max_tokens: Maximum tokens for response
            max_retries: Maximum attempts per analysis
            timeout: Seconds to wait for one attempt
            base_url: Optional OpenAI compatible gateway URL
            backoff_seconds: Base delay for exponential backoff
        """
        self.model = model
        self.max_retries = max_retries
        self.timeout = timeout
        self.backoff_seconds = backoff_seconds

        # Retries are handled here, not inside the client
        self.llm = ChatOpenAI(
            api_key=api_key,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            base_url=base_url,
            max_retries=0,
        )

        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", self._get_system_prompt()),
                ("human", 'Analyze the sentiment of this feedback: "{text}"'),
            ]
        )

        # Create structured LLM
        self.structured_llm = self.llm.with_structured_output(SentimentOutput)

        self.chain = self.prompt | self.structured_llm

        logger.info(f"OpenAI sentiment analyzer initialized with model: {model}")

    def _get_system_prompt(self) -> str:
        """Get system prompt for sentiment analysis."""
        return (
            "You are a sentiment analysis expert. Analyze the sentiment of the given "
            "user feedback about a product or service. Classify it as positive, "
            "negative or neutral, give a score for its intensity (0.0 = very "
            "negative, 1.0 = very positive) and your confidence in the "
            "classification (0.0 to 1.0)."
        )

    async def analyze(self, text: str) -> RemoteSentimentResult:
        """
        Analyze sentiment of a single text.

        Args:
            text: Text content to analyze

        Returns:
            RemoteSentimentResult: Analysis result

        Raises:
            SentimentAnalysisError: When the model cannot be reached or replies
                with something unusable
        """
        if not isinstance(text, str) or not text.strip():
            raise SentimentAnalysisError("Invalid text provided")

        logger.debug(f"Analyzing sentiment for text: {text[:100]}...")
        start_time = time.time()

        output = await self._invoke_with_retry({"text": text})
        if output is None:
            raise SentimentAnalysisError(
                "Empty response from sentiment model", details={"text_length": len(text)}
            )
        result = self._convert_to_sentiment_result(output)

        processing_time = (time.time() - start_time) * 1000
        logger.info(
            f"Sentiment analysis completed in {processing_time:.2f}ms: {result.sentiment.value}"
        )
        return result

    async def _invoke_with_retry(
        self, input_data: Dict[str, str]
    ) -> Optional[SentimentOutput]:
        for attempt in range(self.max_retries):
            try:
                return await asyncio.wait_for(
                    self.chain.ainvoke(input_data), timeout=self.timeout
                )
            except Exception as e:
                status_code = getattr(e, "status_code", None)
                if attempt == self.max_retries - 1 or status_code == 402:
                    logger.error(f"Sentiment analysis failed: {e!r}")
                    raise SentimentAnalysisError(
                        message=self._describe_failure(e, status_code),
                        details={
                            "status_code": status_code,
                            "attempts": attempt + 1,
                            "text_length": len(input_data["text"]),
                        },
                    ) from e
                logger.warning(f"Attempt {attempt + 1} failed: {e!r}, retrying...")
                await asyncio.sleep(self.backoff_seconds * 2**attempt)

        raise SentimentAnalysisError("No analysis attempts configured")

    @staticmethod
    def _describe_failure(error: Exception, status_code: Optional[int]) -> str:
        if isinstance(error, asyncio.TimeoutError):
            return "Sentiment analysis timed out"
        if status_code == 429:
            return "Rate limit exceeded. Please try again later."
        if status_code == 402:
            return "AI service quota exceeded."
        return f"Failed to analyze sentiment: {error}"

    def _convert_to_sentiment_result(
        self, openai_result: SentimentOutput
    ) -> RemoteSentimentResult:
        """Convert OpenAI result to our sentiment result model."""
        return RemoteSentimentResult(
            sentiment=SentimentLabel(openai_result.sentiment),
            score=_unit_or_default(openai_result.score, DEFAULT_SCORE),
            confidence=_unit_or_default(openai_result.confidence, DEFAULT_CONFIDENCE),
            model=self.model,
        )

    async def health_check(self) -> bool:
        """
        Check OpenAI service health.

        Returns:
            bool: True if service is healthy
        """
        try:
            result = await self.analyze("The support team was very helpful.")
            return result.sentiment in SentimentLabel
        except Exception as e:
            logger.error(f"OpenAI sentiment analyzer health check failed: {e}")
            return False
