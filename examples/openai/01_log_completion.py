"""
Log an OpenAI chat completion to Maxim.

Sends a text + image prompt to OpenAI and records the request, the
extracted image attachment and the response as one Maxim trace.

Run with:
    OPENAI_API_KEY=xxx MAXIM_API_KEY=xxx MAXIM_LOG_REPO_ID=xxx python 01_log_completion.py
"""

import logging
import os

from dotenv import load_dotenv
from openai import OpenAI

from openai_maxim import CompletionEvent, MaximCompletionRecorder, MaximLoggerHandle

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
# OPENAI_MAXIM_LOG_LEVEL=DEBUG shows per-message normalization and attachment ids
logging.getLogger("openai_maxim").setLevel(
    os.getenv("OPENAI_MAXIM_LOG_LEVEL", "INFO")
)
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

MODEL = "gpt-4o-mini"


def main():
    load_dotenv()

    messages = [
        {"role": "developer", "content": "You describe images in one sentence."},
        {
            "role": "user",
            "content": [
                {"type": "text", "text": "What is in this picture?"},
                {
                    "type": "image_url",
                    "image_url": {
                        "url": "https://upload.wikimedia.org/wikipedia/commons/3/3a/Cat03.jpg"
                    },
                },
            ],
        },
    ]
    model_parameters = {"temperature": 0.2, "max_tokens": 100}

    client = OpenAI()
    completion = client.chat.completions.create(
        model=MODEL, messages=messages, **model_parameters
    )

    # One handle per process, passed to whatever records completions
    handle = MaximLoggerHandle()
    recorder = MaximCompletionRecorder(handle)
    try:
        trace_id = recorder.record_completion(
            CompletionEvent(
                messages=messages,
                completion=completion,
                model=MODEL,
                model_parameters=model_parameters,
                name="describe-image",
            )
        )
        logger.info(f"Logged completion to Maxim trace {trace_id}")
        print(completion.choices[0].message.content)
    finally:
        handle.shutdown()


if __name__ == "__main__":
    main()
