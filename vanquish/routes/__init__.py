from . import characters, comics, comparison, public, universe

BLUEPRINTS = (
    public.bp,
    characters.bp,
    comics.bp,
    universe.bp,
    comparison.bp,
)
