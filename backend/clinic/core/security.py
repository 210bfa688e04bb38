from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated=["auto"])


#对原始密码进行加盐hash, 数据库只保存hash
def get_hash_pwd(pwd: str):

    return pwd_context.hash(pwd)
