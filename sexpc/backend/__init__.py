from sexpc.backend.codegen import CGenerator, generate
from sexpc.backend.transformer import CTransformer, transform
