"""geotime test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior/invariants enforced across every alphabet.
- integration/  : Real interactions with external systems (SQLite via SQLAlchemy).
- e2e/          : The ``geotime`` command line tool driven through Click's runner.
- helpers/      : Shared utilities and hypothesis strategies (no tests here).

General guidance
- Keep unit fast and deterministic.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
