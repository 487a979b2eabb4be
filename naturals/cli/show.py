from naturals.catalog.collection import ProductCollection
from naturals.catalog.samples import sample_products
from naturals.cli.exitcodes import EXIT_OK
from naturals.core.config import RunConfig
from naturals.rendering.renderers.json import JsonListingRenderer
from naturals.rendering.renderers.text import TextListingRenderer


def run(config: RunConfig) -> int:
    """
    Print the demo catalog, re-sort it, and print it again.
    """
    collection = ProductCollection()
    for p in sample_products():
        collection.add(p)

    if config.output_format == "json":
        before = collection.to_dict()
        collection.sort(config.sort_key)
        doc = {
            "before": before,
            "after": collection.to_dict(),
            "sorted_by": config.sort_key,
        }
        print(JsonListingRenderer().render_document(doc), end="")
        return EXIT_OK

    renderer = TextListingRenderer(verbosity=config.verbosity)
    print(renderer.render(collection), end="")
    print(f"Sorting products by {config.sort_key.label}...")
    collection.sort(config.sort_key)
    print(renderer.render(collection), end="")

    return EXIT_OK
