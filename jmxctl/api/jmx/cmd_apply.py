"""Apply command - converge one or all configured services and restart what changed."""

from collections.abc import Iterator

from ...utils.logger import get_logger
from .._output_schemas.jmx import JmxApplyOutput
from ..config.JmxctlConfig import JmxctlConfig
from ..service.Service import Service
from ..StageResult import StageResult
from ._pending_restart_path import _pending_restart_path
from .build_plan import build_plan
from .Converger import Converger
from .ConvergeResult import ConvergeResult

logger = get_logger("jmx.apply")


def cmd_apply(name: str = "", converger: Converger | None = None) -> StageResult:
    """Converge JMX configuration for ``name`` (all configured services when empty).

    Every service spec is resolved and validated before anything is touched. The run
    stops at the first failure; services converged before it are still reported. A
    service whose restart failed is restarted again on the next run.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        results: list[ConvergeResult] = []

        def fail(message: str) -> None:
            logger.error(message)
            result_obj.result = f"Error: {message}"
            result_obj.output = JmxApplyOutput(
                errors=[message],
                warnings=[],
                services=[r.to_dict() for r in results],
                changed=any(r.changed for r in results),
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = JmxctlConfig.load()
            names = [name] if name else sorted(config.services)
            plans = [build_plan(config.get_service(n).resolve(n)) for n in names]
        except (ValueError, KeyError) as e:
            yield (1.0, "Complete")
            fail(str(e))
            return

        worker = converger or Converger()
        step = 0.8 / max(len(plans), 1)
        for index, plan in enumerate(plans):
            service_name = plan.spec.service
            yield (0.1 + step * index, f"Converging {service_name}...")
            try:
                result = worker.converge(plan)
                results.append(result)
                pending = _pending_restart_path(service_name)
                if result.changed or pending.exists():
                    yield (0.1 + step * (index + 0.5), f"Restarting {plan.spec.unit}...")
                    with Service(config.service) as service:
                        restart = service.restart_service(plan.spec.unit)
                    if not restart.get("success"):
                        pending.parent.mkdir(parents=True, exist_ok=True)
                        pending.touch()
                        yield (1.0, "Complete")
                        fail(f"{service_name}: {restart.get('error', 'restart failed')}")
                        return
                    pending.unlink(missing_ok=True)
                    result.restarted = True
            except Exception as e:
                yield (1.0, "Complete")
                fail(f"{service_name}: {e}")
                return

        yield (1.0, "Complete")
        changed = [r.service for r in results if r.changed]
        if not results:
            result_obj.result = "No services configured"
        elif changed:
            result_obj.result = f"Converged {len(results)} service(s); changed: {', '.join(changed)}"
        else:
            result_obj.result = f"Converged {len(results)} service(s); no changes"
        retried = [r.service for r in results if r.restarted and not r.changed]
        if retried:
            result_obj.result += f"; restarted after earlier failure: {', '.join(retried)}"
        result_obj.output = JmxApplyOutput(
            errors=[],
            warnings=[],
            services=[r.to_dict() for r in results],
            changed=bool(changed),
        ).model_dump(mode="python")
        result_obj.success = True

    target = f"service '{name}'" if name else "all services"
    return StageResult(
        announce=f"Applying JMX configuration for {target}...",
        progress_callback=do_work,
    )
