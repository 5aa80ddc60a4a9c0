"""Plan command - show what apply would manage, without touching the host."""

from collections.abc import Iterator

from .._output_schemas.jmx import JmxPlanOutput
from ..config.JmxctlConfig import JmxctlConfig
from ..StageResult import StageResult
from .build_plan import build_plan


def cmd_plan(name: str) -> StageResult:
    """Derive properties, artifacts and env fragments for one service."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = JmxctlConfig.load()
            spec = config.get_service(name).resolve(name)
        except (ValueError, KeyError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = JmxPlanOutput(
                errors=[str(e)],
                warnings=[],
                service=name,
                ensure="",
                properties={},
                ssl_properties={},
                artifacts=[],
                fragments=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Deriving properties...")
        plan = build_plan(spec)

        yield (1.0, "Complete")
        wanted = sum(1 for a in plan.artifacts if a.ensure == "present")
        result_obj.result = f"Plan for '{name}' (ensure={spec.ensure}): {wanted} artifact(s) present"
        result_obj.output = JmxPlanOutput(
            errors=[],
            warnings=[],
            service=name,
            ensure=spec.ensure,
            properties=plan.properties.management,
            ssl_properties=plan.properties.ssl,
            artifacts=[a.describe() for a in plan.artifacts],
            fragments=[f.describe() for f in plan.fragments],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Planning JMX configuration for '{name}'...", progress_callback=do_work)
