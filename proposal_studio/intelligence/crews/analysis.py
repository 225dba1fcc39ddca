"""Analysis Crew - Runs the requirements analyst with a degraded fallback."""

import asyncio
import json
import logging
import re
from typing import Optional

from crewai import Crew, Process
from pydantic import ValidationError

from proposal_studio.core.config import get_settings
from proposal_studio.core.errors import AnalysisError
from proposal_studio.intelligence.agents.requirements import RequirementsAnalystFactory
from proposal_studio.models import AnalysisResult, StrategicQuestions

logger = logging.getLogger(__name__)

CODE_FENCE = re.compile(r"```(?:json)?\s*")
JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def parse_analysis_text(raw: str) -> AnalysisResult:
    """
    Extract an AnalysisResult from free-form agent output.

    Code fences are stripped and the outermost ``{...}`` is parsed. Missing or
    null fields take their defaults.

    Raises:
        AnalysisError: If no JSON object can be parsed
    """
    cleaned = CODE_FENCE.sub("", raw or "")
    match = JSON_OBJECT.search(cleaned)
    if not match:
        raise AnalysisError("No JSON found in analysis output")

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise AnalysisError(f"Invalid JSON in analysis output: {e}") from e
    if not isinstance(data, dict):
        raise AnalysisError("Analysis output is not a JSON object")

    # Nulls mean "not provided"
    data = {key: value for key, value in data.items() if value is not None}
    for key in ("projectName", "project_name", "clientName", "client_name"):
        if key in data and not data[key]:
            del data[key]

    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        raise AnalysisError(f"Analysis output does not match schema: {e}") from e


class AnalysisCrew:
    """
    Requirements analysis crew with async support.

    Never fails: missing credentials, agent errors and unparseable output
    all produce a degraded AnalysisResult.
    """

    def __init__(self):
        """Initialize crew; the agent is created on first real run."""
        self.settings = get_settings()
        self._agent = None

    @property
    def agent(self):
        if self._agent is None:
            self._agent = RequirementsAnalystFactory.create()
        return self._agent

    async def run_async(
        self,
        text: str,
        questions: Optional[StrategicQuestions] = None
    ) -> AnalysisResult:
        """Execute analysis in a worker thread."""
        logger.info("Starting async requirements analysis")
        return await asyncio.to_thread(self.run, text, questions)

    def run(
        self,
        text: str,
        questions: Optional[StrategicQuestions] = None
    ) -> AnalysisResult:
        """
        Analyze requirements text (synchronous).

        For async contexts, use run_async() instead.

        Args:
            text: Freeform requirements
            questions: Optional strategic hints

        Returns:
            AnalysisResult, with ``degraded`` set when it is a fallback
        """
        logger.info(f"Starting requirements analysis ({len(text)} chars)")

        if not self.settings.OPENAI_API_KEY:
            logger.warning("OpenAI API key not configured - using fallback analysis")
            return self._get_fallback_analysis(text)

        try:
            result = self._run_agent(text, questions)
        except AnalysisError as e:
            logger.warning(f"Analysis output unusable: {e}")
            return self._get_fallback_analysis(e.raw_output or text)
        except Exception as e:
            logger.error(f"Requirements analyst failed: {e}")
            return self._get_fallback_analysis(text)

        logger.info(
            f"Analysis completed - {len(result.deliverables)} deliverable phase(s), "
            f"{len(result.timeline)} timeline entries"
        )
        return result

    def _run_agent(self, text: str, questions: Optional[StrategicQuestions]) -> AnalysisResult:
        """Run the Requirements Analyst agent."""
        task = RequirementsAnalystFactory.create_analysis_task(self.agent, text, questions)

        crew = Crew(
            agents=[self.agent],
            tasks=[task],
            process=Process.sequential,
            verbose=self.settings.DEBUG
        )

        crew.kickoff()

        if task.output and task.output.pydantic:
            return task.output.pydantic

        raw = task.output.raw if task.output else ""
        if not raw:
            raise AnalysisError("Analysis returned no output")
        try:
            return parse_analysis_text(raw)
        except AnalysisError as e:
            raise AnalysisError(e.message, raw_output=raw) from e

    def _get_fallback_analysis(self, text: str) -> AnalysisResult:
        """Fallback bundle: the start of the text as summary, nothing else."""
        limit = self.settings.ANALYSIS_SUMMARY_FALLBACK_CHARS
        return AnalysisResult(summary=(text or "")[:limit], degraded=True)
