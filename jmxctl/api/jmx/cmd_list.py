"""List command - configured services."""

from collections.abc import Iterator

from .._output_schemas.jmx import JmxListOutput
from ..config.JmxctlConfig import JmxctlConfig
from ..StageResult import StageResult


def cmd_list() -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Loading configuration...")
        try:
            config = JmxctlConfig.load()
            specs = [config.services[n].resolve(n) for n in sorted(config.services)]
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = JmxListOutput(errors=[str(e)], warnings=[], services=[], count=0).model_dump(
                mode="python"
            )
            result_obj.success = False
            return

        yield (1.0, "Complete")
        services = [
            {
                "name": spec.service,
                "ensure": spec.ensure,
                "config_dir": str(spec.config_dir),
                "env_file": str(spec.env_file),
            }
            for spec in specs
        ]
        result_obj.result = f"Found {len(services)} service(s)"
        result_obj.output = JmxListOutput(
            errors=[], warnings=[], services=services, count=len(services)
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Listing configured services...", progress_callback=do_work)
