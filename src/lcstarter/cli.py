"""Command line entry point for lcstarter."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

from lcstarter.app import StarterApp
from lcstarter.config import RuntimeSettings

SAMPLE_DOCUMENTS = [
    "LangChain is a framework for developing applications powered by language models.",
    "It enables applications that are context-aware and can reason about their environment.",
    "LangChain provides tools for prompt management, chains, agents, and memory.",
    "Vector databases are used to store and retrieve semantic information efficiently.",
]


async def run_examples(app: StarterApp) -> None:
    """Walk through every core operation and print the results.

    Failures are logged through the app logger and do not propagate.
    """

    try:
        core = await app.initialize()
        logger = app.get_logger()
        logger.info("=== Running lcstarter examples ===")

        logger.info("Example 1: Simple Chat")
        reply = await core.simple_chat(
            "What is artificial intelligence?",
            "You are a helpful AI assistant that provides concise explanations.",
        )
        print("Chat Response:", reply)

        logger.info("Example 2: Prompt Chain")
        chain = await core.create_prompt_chain("Translate the following text to {language}: {text}")
        variables = {"language": "Spanish", "text": "Hello, how are you?"}
        print("Prompt:", chain.render(variables))
        print("Translation:", await chain.call(variables))

        logger.info("Example 3: RAG (Retrieval-Augmented Generation)")
        rag_chain = await core.create_rag_chain(SAMPLE_DOCUMENTS)
        rag_response = await rag_chain.call({"query": "What tools does LangChain provide?"})
        print("RAG Response:", rag_response.result)

        logger.info("Example 4: Similarity Search")
        similar = await core.similarity_search("vector database", SAMPLE_DOCUMENTS, 2)
        print("Similar Documents:", [result.content for result in similar])

        logger.info("Example 5: Text Embeddings")
        vector = await core.get_embeddings("Hello, world!")
        print("Embeddings length:", len(vector))

        logger.info("Example 6: Text Splitting")
        long_text = "This is a very long text that needs to be split into smaller chunks for processing. " * 50
        chunks = await core.split_text(long_text)
        print("Number of chunks:", len(chunks))

        logger.info("=== Examples completed successfully ===")
    except Exception as exc:
        app.get_logger().error("Error running examples", exc)


def _print_config(app: StarterApp) -> None:
    config = app.get_config()
    print("Current configuration:")
    print(f"  - Model: {config.openai.model}")
    print(f"  - Temperature: {config.openai.temperature}")
    print(f"  - Max Tokens: {config.openai.max_tokens}")
    print(f"  - Embedding Model: {config.embeddings.embedding_model}")
    print(f"  - Log Level: {config.logging.log_level.value}")


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Start the lcstarter application shell.")
    parser.add_argument(
        "--run-examples",
        action="store_true",
        help="Run the demonstration sequence (same as RUN_EXAMPLES=true).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    print("lcstarter: LangChain starter template")
    print("=====================================")

    if args.run_examples or RuntimeSettings().run_examples:
        try:
            app = StarterApp()
        except Exception as exc:
            print(f"Fatal error: {exc}", file=sys.stderr)
            return 1
        asyncio.run(run_examples(app))
        return 0

    print("To run examples, set RUN_EXAMPLES=true in your .env file or pass --run-examples")
    print("For custom usage, import StarterApp and build on its core")
    try:
        app = StarterApp()
        asyncio.run(app.initialize())
    except Exception as exc:
        print(f"Failed to initialize lcstarter: {exc}", file=sys.stderr)
        return 1
    print("lcstarter initialized and ready for use!")
    _print_config(app)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    sys.exit(main())
