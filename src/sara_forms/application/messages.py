# Mensagens exibidas pelos formulários ao lado de cada campo inválido
NAME_REQUIRED = "Nome é obrigatório"
EMAIL_INVALID = "Email inválido"
CPF_INVALID = "CPF inválido"
PHONE_REQUIRED = "Telefone é obrigatório"
ADDRESS_REQUIRED = "Endereço é obrigatório"
PASSWORD_TOO_SHORT = "Senha deve ter pelo menos 8 caracteres"
PASSWORDS_DO_NOT_MATCH = "Senhas não coincidem"
