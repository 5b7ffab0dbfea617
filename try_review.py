"""
Manual smoke run of the prompt + model half of ReviewBrief, no Jira or GitHub needed.
Run with: uv run python try_review.py   (needs a local model server, e.g. `ollama serve`)
"""
import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from dotenv import load_dotenv
load_dotenv()

from reviewbrief.agents.reviewer import ReviewModel
from reviewbrief.console import print_result
from reviewbrief.core.config_models import Settings
from reviewbrief.core.errors import ModelUnavailable, describe
from reviewbrief.core.pr_models import FileChange, PullRequestRecord
from reviewbrief.core.types import DevelopmentContext, PromptResult, TicketRecord
from reviewbrief.prompts.review import build_prompt

# Sample change: the ticket asks for a retry limit, the patch adds one but forgets the config flag
SAMPLE_PATCH = '''@@ -12,9 +12,17 @@ func Fetch(url string) ([]byte, error) {
-	resp, err := http.Get(url)
-	if err != nil {
-		return nil, err
-	}
+	var resp *http.Response
+	var err error
+	for attempt := 0; attempt < 3; attempt++ {
+		resp, err = http.Get(url)
+		if err == nil {
+			break
+		}
+		time.Sleep(time.Duration(attempt+1) * time.Second)
+	}
+	if err != nil {
+		return nil, err
+	}
 	defer resp.Body.Close()
'''


async def main():
    settings = Settings.from_env()

    print("Building sample context...")
    context = DevelopmentContext(
        ticket=TicketRecord(
            key="DEMO-7",
            summary="Retry flaky downloads",
            description="Downloads fail intermittently. Retry up to MAX_RETRIES times (configurable) with backoff.",
            status="In Review",
        ),
        pull_request=PullRequestRecord(
            number=42,
            title="Add retries to Fetch",
            state="open",
            body="Retries Fetch three times with linear backoff.",
            created_at=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
            updated_at=datetime(2024, 5, 2, 14, 0, tzinfo=timezone.utc),
            author_login="octocat",
            files=(
                FileChange(path="fetch/fetch.go", status="modified", additions=11, deletions=3, patch=SAMPLE_PATCH),
                FileChange(path="docs/diagram.png", status="added", additions=0, deletions=0),
            ),
        ),
    )

    prompt = build_prompt(context)
    print(f"Asking {settings.model.model_name}...")
    print("-" * 60)

    try:
        completion = await ReviewModel(settings.model).invoke(prompt)
    except ModelUnavailable as error:
        print(describe(error))
        return

    print_result(PromptResult(context=context, prompt=prompt, completion=completion), show_prompt=True)


if __name__ == "__main__":
    asyncio.run(main())
