"""
Main entry point for the LMS registry.
"""

import sys
from typing import Optional

import structlog

from .config import Settings, get_settings
from .core.exceptions import AuthError, BootstrapError, ConfigurationError
from .logging_config import configure_logging
from .persistence import Registry, seed_registry
from .services import AuthService, Session

logger = structlog.get_logger(__name__)


class LMSPlatform:
    """Owns the registry for one process and hands out role sessions."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._registry = Registry()
        self._auth = AuthService(self._registry)

        if self._settings.seed_on_startup:
            seed_registry(self._registry)
        logger.info("platform_initialized", courses=self._registry.course_count,
                    users=self._registry.user_count)

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def auth(self) -> AuthService:
        return self._auth

    def login(self, email: str, password: str) -> Session:
        return self._auth.login(email, password)

    def run_demo(self, out=None):
        """Walk every role through a short scripted session."""
        out = out or sys.stdout

        def show(label, result):
            status = "ok" if result.success else f"failed ({result.error_code})"
            print(f"  {label}: {status} - {result.message}", file=out)

        print("=== Admin ===", file=out)
        admin = self.login("admin1@example.com", "adminpass")
        for summary in admin.list_courses():
            print(f"  {summary.index + 1}: {summary.name} (Teacher: {summary.teacher_email})", file=out)
        show("enroll alice", admin.enroll_student(0, "alice@example.com", "alicepass"))
        show("enroll bob", admin.enroll_student(0, "bob@example.com", "bobpass"))
        show("enroll alice again", admin.enroll_student(0, "alice@example.com"))
        show("add course for busy teacher", admin.add_course("Chemistry", "teacher1@example.com"))

        print("=== Teacher ===", file=out)
        teacher = self.login("teacher1@example.com", "teacherpass")
        show("add content", teacher.add_content(0, "Linear Equations"))
        show("grade alice", teacher.add_grade(0, "alice@example.com", 85))
        show("grade carol", teacher.add_grade(0, "carol@example.com", 70))
        show("students", teacher.assigned_students(0))

        print("=== Student ===", file=out)
        student = self.login("alice@example.com", "alicepass")
        show("grade", student.view_grade(0))
        show("self-enroll", student.enroll(0))
        for grade in student.grades():
            shown = f"{grade.grade}%" if grade.grade is not None else "no grade"
            print(f"  {grade.course_name}: {shown}", file=out)

        return admin.report()


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="LMS course and enrollment registry")
    parser.add_argument("--report", action="store_true", help="Print the admin report as JSON")
    parser.add_argument("--demo", action="store_true", help="Run a scripted demo session")
    parser.add_argument("--log-level", type=str, help="Override the configured log level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")

    args = parser.parse_args(argv)

    settings = get_settings()
    if args.json_logs:
        settings = settings.model_copy(update={"log_json": True})

    try:
        configure_logging(settings, level=args.log_level)
        platform = LMSPlatform(settings)
    except (ConfigurationError, BootstrapError) as e:
        print(f"Fatal error: {e.message}", file=sys.stderr)
        return 1

    try:
        if args.demo:
            report = platform.run_demo()
            if args.report:
                print(report.model_dump_json(indent=2))
        elif args.report:
            admin = platform.login("admin1@example.com", "adminpass")
            print(admin.report().model_dump_json(indent=2))
        else:
            parser.print_help()
    except AuthError as e:
        print(f"Fatal error: {e.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
