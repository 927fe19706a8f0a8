"""ITEMFLOW test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior enforced across every ItemsService adapter and
                  every CallbackContext implementation.
- integration/  : Services composed by the bootstrap, loading on real threads.
- e2e/          : The `itemflow` CLI driven through click's CliRunner.
- fixtures/     : Domain data factories (no tests here).
- helpers/      : Fake services and shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic; prefer fakes over mocks at boundaries.
- Anything that resolves futures on worker threads waits with a timeout.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, contract, integration, e2e, property
"""
