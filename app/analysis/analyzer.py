"""AI-powered document analyzer."""

from pathlib import Path

from app.analysis.models import AnalysisResult
from app.analysis.parser import parse_analysis_response
from app.llm.client_base import BaseLLMClient
from app.llm.prompt_loader import load_prompt_template
from app.logging.logger import Log
from app.processor.exceptions import AnalysisFailedError

DEFAULT_MAX_TEXT_CHARS = 10_000


class DocumentAnalyzer:
    """Builds a bounded prompt, calls the LLM once and parses its reply."""

    def __init__(
        self,
        *,
        client: BaseLLMClient,
        max_text_chars: int = DEFAULT_MAX_TEXT_CHARS,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._max_text_chars = max_text_chars
        self._prompt_template = load_prompt_template(prompt_template_path)

    def analyze(self, text: str) -> AnalysisResult:
        """Summarize and classify document text.

        Raises:
            AnalysisFailedError: if the provider call fails or times out.
        """
        prompt = self.build_prompt(text)
        Log.debug(f"Analysis prompt:\n{prompt}")

        try:
            raw_response = self._client.complete(prompt)
        except Exception as exc:
            Log.error(f"LLM analysis error: {exc}")
            raise AnalysisFailedError(f"Failed to analyze document with AI: {exc}") from exc
        Log.debug(f"AI raw response:\n{raw_response}")

        result = parse_analysis_response(raw_response)
        Log.info(
            f"Analysis complete: type={result.type!r}, "
            f"{len(result.attributes)} attributes"
        )
        return result

    def build_prompt(self, text: str) -> str:
        return self._prompt_template.format(document_text=text[: self._max_text_chars])
