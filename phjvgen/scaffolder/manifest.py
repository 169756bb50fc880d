"""What gets generated, and where.

Each entry pairs a template (relative to the template directory) with an
output path relative to the project root.  Output paths are templates
themselves: ``{{PACKAGE_PATH}}`` and the module tokens are filled in from
the same placeholder mapping used for the file contents.
"""

from __future__ import annotations

_JAVA = "src/main/java/{{PACKAGE_PATH}}"
_TEST = "src/test/java/{{PACKAGE_PATH}}"

COMMON = "common"
DOMAIN = "domain"
INFRASTRUCTURE = "infrastructure"
ADAPTER_REST = "adapter/adapter-rest"
ADAPTER_SCHEDULE = "adapter/adapter-schedule"
APPLICATION_USER = "application/application-user"
STARTER = "starter"


# ---------------------------------------------------------------------------
# Directory layout
# ---------------------------------------------------------------------------

PROJECT_DIRS: tuple[str, ...] = (
    # common
    f"{COMMON}/{_JAVA}/common/exception",
    f"{COMMON}/{_JAVA}/common/response",
    f"{COMMON}/{_JAVA}/common/constant",
    f"{COMMON}/{_JAVA}/common/utils",
    f"{COMMON}/{_JAVA}/common/annotation",
    f"{COMMON}/src/main/resources",
    f"{COMMON}/{_TEST}/common",
    # domain
    f"{DOMAIN}/{_JAVA}/domain/model",
    f"{DOMAIN}/{_JAVA}/domain/event",
    f"{DOMAIN}/{_JAVA}/domain/repository",
    f"{DOMAIN}/{_JAVA}/domain/service",
    f"{DOMAIN}/src/main/resources",
    f"{DOMAIN}/{_TEST}/domain",
    # infrastructure
    f"{INFRASTRUCTURE}/{_JAVA}/infrastructure/persistence/mapper",
    f"{INFRASTRUCTURE}/{_JAVA}/infrastructure/persistence/impl",
    f"{INFRASTRUCTURE}/{_JAVA}/infrastructure/cache",
    f"{INFRASTRUCTURE}/{_JAVA}/infrastructure/mq",
    f"{INFRASTRUCTURE}/{_JAVA}/infrastructure/gateway",
    f"{INFRASTRUCTURE}/{_JAVA}/infrastructure/config",
    f"{INFRASTRUCTURE}/src/main/resources/mapper",
    f"{INFRASTRUCTURE}/src/main/resources/db/migration",
    f"{INFRASTRUCTURE}/{_TEST}/infrastructure",
    # adapter-rest
    f"{ADAPTER_REST}/{_JAVA}/adapter/rest/controller",
    f"{ADAPTER_REST}/{_JAVA}/adapter/rest/request",
    f"{ADAPTER_REST}/{_JAVA}/adapter/rest/response",
    f"{ADAPTER_REST}/{_JAVA}/adapter/rest/assembler",
    f"{ADAPTER_REST}/{_JAVA}/adapter/rest/interceptor",
    f"{ADAPTER_REST}/{_JAVA}/adapter/rest/filter",
    f"{ADAPTER_REST}/{_JAVA}/adapter/rest/config",
    f"{ADAPTER_REST}/{_JAVA}/adapter/rest/advice",
    f"{ADAPTER_REST}/src/main/resources",
    f"{ADAPTER_REST}/{_TEST}/adapter/rest",
    # adapter-schedule
    f"{ADAPTER_SCHEDULE}/{_JAVA}/adapter/schedule/job",
    f"{ADAPTER_SCHEDULE}/{_JAVA}/adapter/schedule/config",
    f"{ADAPTER_SCHEDULE}/src/main/resources",
    f"{ADAPTER_SCHEDULE}/{_TEST}/adapter/schedule",
    # application-user
    f"{APPLICATION_USER}/{_JAVA}/application/user/service",
    f"{APPLICATION_USER}/{_JAVA}/application/user/dto",
    f"{APPLICATION_USER}/{_JAVA}/application/user/assembler",
    f"{APPLICATION_USER}/{_JAVA}/application/user/executor",
    f"{APPLICATION_USER}/{_JAVA}/application/user/listener",
    f"{APPLICATION_USER}/src/main/resources",
    f"{APPLICATION_USER}/{_TEST}/application/user",
    # starter
    f"{STARTER}/{_JAVA}",
    f"{STARTER}/src/main/resources",
    f"{STARTER}/{_TEST}",
)

# Relative to ``application/application-{{MODULE_NAME}}``.
MODULE_DIRS: tuple[str, ...] = (
    f"{_JAVA}/application/{{{{MODULE_PACKAGE}}}}/service",
    f"{_JAVA}/application/{{{{MODULE_PACKAGE}}}}/dto",
    f"{_JAVA}/application/{{{{MODULE_PACKAGE}}}}/assembler",
    f"{_JAVA}/application/{{{{MODULE_PACKAGE}}}}/executor",
    "src/main/resources",
    f"{_TEST}/application/{{{{MODULE_PACKAGE}}}}",
)


# ---------------------------------------------------------------------------
# Template -> output path
# ---------------------------------------------------------------------------

PARENT_POM: tuple[str, str] = ("pom/parent.xml.j2", "pom.xml")

MODULE_POMS: tuple[tuple[str, str], ...] = (
    ("pom/common.xml.j2", f"{COMMON}/pom.xml"),
    ("pom/domain.xml.j2", f"{DOMAIN}/pom.xml"),
    ("pom/infrastructure.xml.j2", f"{INFRASTRUCTURE}/pom.xml"),
    ("pom/adapter-rest.xml.j2", f"{ADAPTER_REST}/pom.xml"),
    ("pom/adapter-schedule.xml.j2", f"{ADAPTER_SCHEDULE}/pom.xml"),
    ("pom/application-user.xml.j2", f"{APPLICATION_USER}/pom.xml"),
    ("pom/starter.xml.j2", f"{STARTER}/pom.xml"),
)

STARTER_FILES: tuple[tuple[str, str], ...] = (
    ("java/starter/Application.java.j2", f"{STARTER}/{_JAVA}/Application.java"),
)

CONFIG_FILES: tuple[tuple[str, str], ...] = (
    ("config/application.yml.j2", f"{STARTER}/src/main/resources/application.yml"),
    ("config/application-dev.yml.j2", f"{STARTER}/src/main/resources/application-dev.yml"),
)

DOC_FILES: tuple[tuple[str, str], ...] = (
    ("config/README.md.j2", "README.md"),
    ("config/gitignore.j2", ".gitignore"),
)

DEMO_FILES: tuple[tuple[str, str], ...] = (
    # common
    ("java/common/Result.java.j2", f"{COMMON}/{_JAVA}/common/response/Result.java"),
    ("java/common/BusinessException.java.j2",
     f"{COMMON}/{_JAVA}/common/exception/BusinessException.java"),
    ("java/common/ErrorCode.java.j2", f"{COMMON}/{_JAVA}/common/constant/ErrorCode.java"),
    # domain
    ("java/domain/User.java.j2", f"{DOMAIN}/{_JAVA}/domain/model/User.java"),
    ("java/domain/UserRepository.java.j2",
     f"{DOMAIN}/{_JAVA}/domain/repository/UserRepository.java"),
    ("java/domain/UserDomainService.java.j2",
     f"{DOMAIN}/{_JAVA}/domain/service/UserDomainService.java"),
    ("java/domain/UserCreatedEvent.java.j2",
     f"{DOMAIN}/{_JAVA}/domain/event/UserCreatedEvent.java"),
    # infrastructure
    ("java/infrastructure/UserDO.java.j2",
     f"{INFRASTRUCTURE}/{_JAVA}/infrastructure/persistence/dataobject/UserDO.java"),
    ("java/infrastructure/UserMapper.java.j2",
     f"{INFRASTRUCTURE}/{_JAVA}/infrastructure/persistence/mapper/UserMapper.java"),
    ("java/infrastructure/UserRepositoryImpl.java.j2",
     f"{INFRASTRUCTURE}/{_JAVA}/infrastructure/persistence/impl/UserRepositoryImpl.java"),
    ("sql/V1__create_user_table.sql.j2",
     f"{INFRASTRUCTURE}/src/main/resources/db/migration/V1__create_user_table.sql"),
    # application-user
    ("java/application/UserDTO.java.j2",
     f"{APPLICATION_USER}/{_JAVA}/application/user/dto/UserDTO.java"),
    ("java/application/CreateUserCommand.java.j2",
     f"{APPLICATION_USER}/{_JAVA}/application/user/dto/CreateUserCommand.java"),
    ("java/application/UpdateUserCommand.java.j2",
     f"{APPLICATION_USER}/{_JAVA}/application/user/dto/UpdateUserCommand.java"),
    ("java/application/UserAssembler.java.j2",
     f"{APPLICATION_USER}/{_JAVA}/application/user/assembler/UserAssembler.java"),
    ("java/application/UserService.java.j2",
     f"{APPLICATION_USER}/{_JAVA}/application/user/service/UserService.java"),
    ("java/application/RegisterUserExecutor.java.j2",
     f"{APPLICATION_USER}/{_JAVA}/application/user/executor/RegisterUserExecutor.java"),
    ("java/application/UserEventListener.java.j2",
     f"{APPLICATION_USER}/{_JAVA}/application/user/listener/UserEventListener.java"),
    # adapter-rest
    ("java/adapter/CreateUserRequest.java.j2",
     f"{ADAPTER_REST}/{_JAVA}/adapter/rest/request/CreateUserRequest.java"),
    ("java/adapter/UpdateUserRequest.java.j2",
     f"{ADAPTER_REST}/{_JAVA}/adapter/rest/request/UpdateUserRequest.java"),
    ("java/adapter/UserResponseVO.java.j2",
     f"{ADAPTER_REST}/{_JAVA}/adapter/rest/response/UserResponseVO.java"),
    ("java/adapter/UserControllerAssembler.java.j2",
     f"{ADAPTER_REST}/{_JAVA}/adapter/rest/assembler/UserControllerAssembler.java"),
    ("java/adapter/ResponseVOAssembler.java.j2",
     f"{ADAPTER_REST}/{_JAVA}/adapter/rest/assembler/ResponseVOAssembler.java"),
    ("java/adapter/LoggingFilter.java.j2",
     f"{ADAPTER_REST}/{_JAVA}/adapter/rest/filter/LoggingFilter.java"),
    ("java/adapter/AuthInterceptor.java.j2",
     f"{ADAPTER_REST}/{_JAVA}/adapter/rest/interceptor/AuthInterceptor.java"),
    ("java/adapter/WebMvcConfig.java.j2",
     f"{ADAPTER_REST}/{_JAVA}/adapter/rest/config/WebMvcConfig.java"),
    ("java/adapter/GlobalExceptionHandler.java.j2",
     f"{ADAPTER_REST}/{_JAVA}/adapter/rest/advice/GlobalExceptionHandler.java"),
    ("java/adapter/UserController.java.j2",
     f"{ADAPTER_REST}/{_JAVA}/adapter/rest/controller/UserController.java"),
    ("java/adapter/HealthController.java.j2",
     f"{ADAPTER_REST}/{_JAVA}/adapter/rest/controller/HealthController.java"),
    # starter
    ("java/starter/Application.java.j2", f"{STARTER}/{_JAVA}/Application.java"),
)

# Relative to ``application/application-{{MODULE_NAME}}``.
MODULE_POM: tuple[str, str] = ("pom/application-module.xml.j2", "pom.xml")
MODULE_SERVICE: tuple[str, str] = (
    "java/module/Service.java.j2",
    f"{_JAVA}/application/{{{{MODULE_PACKAGE}}}}/service/{{{{MODULE_CLASS}}}}Service.java",
)
