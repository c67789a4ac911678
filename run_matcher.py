import json
import logging
from typing import Dict, Optional

import click

from data_loader.document_loader import DocumentLoader
from matching.config import DEFAULT_CHUNK_SIZE, DEFAULT_MODULUS, BatchCount, MatchConfig
from matching.errors import MatchingError
from matching.matching_pipeline import Algorithm, MatchingPipeline

ALGORITHM_CHOICES = [str(a.value) for a in Algorithm] + [a.label for a in Algorithm]


def format_summary(summary: Dict) -> str:
    if summary["algorithm"] == Algorithm.EXACT.label:
        return "Exact match" if summary["exact"] else "Not an exact match"
    return (
        f"{summary['matched']} chunks matched (out of {summary['chunks']}), "
        f"percentage: {summary['percentage']:.2f}"
    )


def format_diagnostics(summary: Dict) -> Optional[str]:
    diag = summary.get("diagnostics") or {}
    if diag.get("chunks"):
        # one pattern hash line and one window hash line per chunk
        lines = []
        for trace in diag["chunks"]:
            lines.append(str(trace["pattern_hash"]))
            lines.append(" ".join(str(h) for h in trace["window_hashes"]))
        return "\n".join(lines)
    if diag.get("bloom_bits") is not None:
        return diag["bloom_bits"]
    return None


@click.command()
@click.option(
    "-t",
    "--algorithm",
    type=click.Choice(ALGORITHM_CHOICES, case_sensitive=False),
    default=Algorithm.SIMPLE.label,
    show_default=True,
    help="Matching algorithm: 0/exact, 1/simple, 2/rk, 3/rkbatch.",
)
@click.option(
    "-k",
    "--chunk-size",
    type=click.IntRange(min=1),
    default=DEFAULT_CHUNK_SIZE,
    show_default=True,
    help="Length of the query chunks to match.",
)
@click.option(
    "-q",
    "--modulus",
    type=int,
    default=DEFAULT_MODULUS,
    show_default=True,
    help="Prime modulus for the Rabin-Karp hash.",
)
@click.option(
    "--batch-count",
    type=click.Choice([c.value for c in BatchCount]),
    default=BatchCount.WINDOWS.value,
    show_default=True,
    help="Batch mode tally: matching target windows or matching query chunks.",
)
@click.option(
    "--json/--text",
    "as_json",
    default=False,
    show_default=True,
    help="Print the full run summary as JSON.",
)
@click.option(
    "--compare",
    is_flag=True,
    default=False,
    help="Run simple, rk and rkbatch on the same documents.",
)
@click.option(
    "--plot",
    "plot_path",
    type=click.Path(dir_okay=False, writable=True, path_type=str),
    default=None,
    help="Save a comparison chart to this file (implies --compare).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
@click.argument("query_doc", type=click.Path(exists=True, dir_okay=False, readable=True, path_type=str))
@click.argument("doc", type=click.Path(exists=True, dir_okay=False, readable=True, path_type=str))
def main(
        algorithm: str,
        chunk_size: int,
        modulus: int,
        batch_count: str,
        as_json: bool,
        compare: bool,
        plot_path: Optional[str],
        verbose: bool,
        query_doc: str,
        doc: str,
) -> None:
    """
    Match every chunk of QUERY_DOC against DOC and report how many occur in it.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = MatchConfig(chunk_size=chunk_size, modulus=modulus, batch_count=BatchCount(batch_count))
        pipeline = MatchingPipeline(config)
        loader = DocumentLoader()
        query = loader.load(query_doc).data
        target = loader.load(doc).data

        if compare or plot_path:
            summaries = pipeline.compare(query, target)
        else:
            summaries = [pipeline.run(algorithm, query, target)]
    except MatchingError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        payload = summaries if len(summaries) > 1 else summaries[0]
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for summary in summaries:
            if len(summaries) > 1:
                click.echo(f"[{summary['algorithm']}] {summary['elapsed_us']} us")
            diag = format_diagnostics(summary)
            if diag is not None:
                click.echo(diag)
            click.echo(format_summary(summary))

    if plot_path:
        # imported lazily so plain runs do not pay for matplotlib
        from plot.match_chart import plot_comparison

        plot_comparison(summaries, output=plot_path)
        click.echo(f"Saved comparison chart to {plot_path}.", err=True)


if __name__ == "__main__":
    main()
