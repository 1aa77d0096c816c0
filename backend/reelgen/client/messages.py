# User-facing (pt-BR) messages shown as toasts.

RATE_LIMITED = "Limite de requisições excedido. Tente novamente em alguns segundos."
INSUFFICIENT_CREDITS = "Créditos insuficientes. Por favor, adicione créditos à sua conta."
GENERATION_FAILED = "Erro ao gerar conteúdo. Tente novamente."
FILL_ALL_FIELDS = "Preencha todos os campos antes de gerar o Reel."

SIGN_IN_TO_SAVE = "Faça login para salvar seus Reels."
SAVE_REEL_FAILED = "Erro ao salvar Reel."
LOAD_REELS_FAILED = "Erro ao carregar Reels salvos."
DELETE_REEL_FAILED = "Erro ao excluir Reel."
OPEN_REEL_FAILED = "Erro ao abrir Reel."

INVALID_CREDENTIALS = "Email ou senha incorretos."
ALREADY_REGISTERED = "Este email já está cadastrado."
SIGN_IN_FAILED = "Erro ao fazer login. Tente novamente."
SIGN_UP_FAILED = "Erro ao criar conta. Tente novamente."
SIGN_OUT_FAILED = "Erro ao sair. Tente novamente."
