from dataclasses import dataclass, field


@dataclass(frozen=True)
class RegisterFormDTO:
    name: str = ""
    email: str = ""
    cpf: str = ""
    phone: str = ""
    address: str = ""
    password: str = ""
    confirm_password: str = ""


@dataclass(frozen=True)
class LoginFormDTO:
    email: str = ""
    password: str = ""


@dataclass(frozen=True)
class ProfileFormDTO:
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


@dataclass(frozen=True)
class FormValidationResult:
    errors: dict[str, str] = field(default_factory=dict)
    # normalised values of fields that passed, e.g. the bare CPF digit stream
    cleaned: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors
