"""
Static lookup tables for the spell-check and completion engine.

All tables are read-only module constants; keys are lower-case.
"""
from typing import Dict, FrozenSet, List


# Abbreviations, chat slang and technical/brand terms (English and Spanish)
# that are never reported as misspelled.
IGNORE_WORDS: FrozenSet[str] = frozenset({
    # Web and tooling
    "api", "url", "http", "https", "html", "css", "js", "ts", "json", "xml",
    "npm", "git", "github", "vscode", "typescript", "javascript", "react",
    "nodejs", "webpack", "vite", "eslint", "prettier", "docker", "kubernetes",
    "mongodb", "postgresql", "mysql", "redis", "graphql", "restful", "oauth",
    "jwt", "auth", "async", "await", "const", "let", "var", "func", "def",
    "etc", "vs", "ie", "eg", "ok", "info", "config", "env", "dev", "prod",
    # Spanish chat slang
    "tb", "xq", "pq", "q", "k", "x", "d", "xd", "jaja", "jeje", "jiji",
    "tmb", "tbien", "bn", "porfis", "porfa", "dnd", "dsp", "msj", "msg",
    # English chat slang
    "lol", "omg", "btw", "idk", "imo", "imho", "fyi", "asap", "ty", "thx",
    "pls", "plz", "rn", "nvm", "brb", "gtg", "gonna", "wanna", "gotta",
    # Machine learning
    "ml", "ai", "llm", "gpt", "claude", "openai", "anthropic", "prompt",
    "token", "embedding", "rag", "vector", "pinecone", "weaviate",
    "transformer", "attention", "encoder", "decoder", "bert", "roberta",
    "finetune", "pretrain", "hyperparameter", "batch", "epoch", "learning",
    "gradient", "optimizer", "adam", "sgd", "rmsprop", "dropout", "relu",
    "softmax", "sigmoid", "tanh", "bias", "weight", "layer", "neural",
    "convolutional", "recurrent", "lstm", "gru", "rnn", "cnn", "gan",
    "diffusion", "stable", "midjourney", "dall", "dalle", "huggingface",
    "langchain", "llamaindex", "chromadb", "faiss", "anyscale", "modal",
    "replicate", "cohere", "mistral",
    # Companies and cloud
    "meta", "google", "microsoft", "amazon", "azure", "aws", "gcp", "cloud",
    "serverless", "edge", "lambda", "vercel", "netlify", "render", "railway",
    "fly", "k8s", "ci", "cd",
    # Commit vocabulary
    "pr", "mr", "cr", "issue", "bug", "fix", "feat", "chore", "refactor",
    "test", "docs", "style", "perf", "build", "revert",
})


# Curated in-word completions. Checked in insertion order; the two-letter
# keys come last so the three-letter ones win whenever both match.
COMMON_COMPLETIONS: Dict[str, List[str]] = {
    # Spanish
    "hol": ["hola"],
    "gra": ["gracias", "grande", "gratis"],
    "bue": ["bueno", "buenas", "buenos", "buena"],
    "com": ["como", "completar", "comenzar", "compartir"],
    "qui": ["quiero", "quieres", "quizás", "quien"],
    "est": ["este", "esta", "estoy", "estar", "estos", "estas"],
    "por": ["porque", "por", "portal"],
    "nec": ["necesito", "necesitas", "necesario", "necesaria"],
    "pue": ["puede", "puedes", "puedo", "pueden"],
    "ten": ["tengo", "tienes", "tenemos", "tener"],
    "hac": ["hacer", "haciendo", "haces", "hace"],
    "ent": ["entonces", "entiendo", "entre", "entrada"],
    "per": ["pero", "persona", "permitir", "perfecto"],
    "tod": ["todo", "todos", "toda", "todas", "todavía"],
    "muc": ["mucho", "muchos", "mucha", "muchas"],
    "aho": ["ahora", "ahorrar", "ahorro"],
    "sie": ["siempre", "siendo", "siento"],
    "nun": ["nunca"],
    "tam": ["también", "tampoco"],
    "sol": ["solo", "solamente", "solución"],
    "cua": ["cuando", "cual", "cuales", "cuanto"],
    "don": ["donde", "dónde"],
    "alg": ["algo", "alguno", "alguna", "algunos"],
    "nad": ["nada", "nadie"],
    "mis": ["mismo", "misma", "mismos"],
    "otr": ["otro", "otra", "otros", "otras"],
    "pri": ["primero", "primera", "principal", "privado"],
    "seg": ["segundo", "seguro", "seguir", "según"],
    "ter": ["tercero", "terminar", "terminal"],
    # English
    "hel": ["hello", "help", "helpful"],
    "tha": ["thanks", "thank", "that", "than"],
    "wha": ["what", "whatever", "whats"],
    "the": ["there", "these", "they", "them", "their", "then"],
    "ple": ["please", "plenty"],
    "wou": ["would", "wouldn't"],
    "cou": ["could", "couldn't", "course"],
    "sho": ["should", "shouldn't", "show"],
    "nee": ["need", "needed", "needs"],
    "wan": ["want", "wanted", "wants"],
    "thi": ["this", "think", "thing", "things"],
    "wor": ["work", "working", "works", "world"],
    "jus": ["just"],
    "rig": ["right"],
    "kno": ["know", "known", "knowledge"],
    "bec": ["because", "become", "became"],
    "rea": ["really", "read", "ready", "reason"],
    "mak": ["make", "making", "makes"],
    "tak": ["take", "taking", "takes"],
    "goo": ["good", "google"],
    "gre": ["great", "green"],
    "sor": ["sorry"],
    "und": ["understand", "under"],
    "pro": ["problem", "probably", "project", "provide"],
    "dif": ["different", "difficult"],
    "imp": ["important", "improve", "import"],
    "int": ["into", "interesting", "information"],
    "act": ["actually", "action", "active"],
    # Two-letter fallbacks
    "th": ["the", "that", "this"],
    "wh": ["what", "when", "where", "which"],
    "qu": ["que", "quiero"],
    "pe": ["pero", "people"],
}


# Continuations keyed by the last two completed words.
PHRASE_PAIRS: Dict[str, List[str]] = {
    "thank you": ["so much", "very much"],
    "how are": ["you"],
    "let me": ["know"],
    "as soon": ["as possible"],
    "in order": ["to"],
    "on the": ["other hand"],
    "by the": ["way"],
    "at the": ["same time"],
    "looking forward": ["to hearing from you"],
    "muchas gracias": ["por todo"],
    "por lo": ["tanto"],
    "lo siento": ["mucho"],
    "me gustaría": ["saber"],
    "qué tal": ["estás"],
    "hasta la": ["próxima"],
    "de vez": ["en cuando"],
    "a la": ["vez"],
}


# Multi-word continuations keyed by the last completed word.
PHRASE_COMPLETIONS: Dict[str, List[str]] = {
    "looking": ["forward to"],
    "nice": ["to meet you"],
    "feel": ["free to"],
    "thanks": ["for your help"],
    "please": ["let me know"],
    "hope": ["you are well"],
    "encantado": ["de conocerte"],
    "espero": ["que estés bien"],
    "cómo": ["estás"],
    "hasta": ["pronto"],
}


# Single-word continuations keyed by the last completed word.
NEXT_WORD_PREDICTIONS: Dict[str, List[str]] = {
    "muchas": ["gracias"],
    "buenos": ["días"],
    "buenas": ["noches", "tardes"],
    "por": ["favor"],
    "sin": ["embargo"],
    "tal": ["vez"],
    "mucho": ["gusto"],
    "thank": ["you"],
    "good": ["morning", "luck"],
    "best": ["regards"],
    "kind": ["regards"],
    "each": ["other"],
    "according": ["to"],
    "because": ["of"],
    "due": ["to"],
    "instead": ["of"],
    "how": ["are"],
}
